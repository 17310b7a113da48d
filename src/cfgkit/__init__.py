# cfgkit, context free grammars, Chomsky Normal Form and CYK membership
import cfgkit.symbols as symbols
import cfgkit.logging as logging
import cfgkit.config as config
import cfgkit.grammar as grammar
import cfgkit.cyk as cyk
import cfgkit.cli as cli

from cfgkit.symbols import Symbol, Alphabet, Word, alphabet, word
from cfgkit.grammar import (Rule, Grammar, ContextFreeGrammar, CFGNormalizer, GrammarException,
                            IncorrectGrammar, NotContextFree, SymbolSpaceExhausted, FoundLongRule)
from cfgkit.cyk import CYK
from cfgkit.config import Config
