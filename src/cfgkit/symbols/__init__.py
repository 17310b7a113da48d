from cfgkit.symbols._symbol import Symbol, Alphabet, Word, alphabet, word
