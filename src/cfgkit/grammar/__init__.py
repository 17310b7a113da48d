from cfgkit.grammar._rule import Rule
from cfgkit.grammar._grammar import Grammar
from cfgkit.grammar._cfgnormalizer import CFGNormalizer
from cfgkit.grammar._cfg import ContextFreeGrammar
from cfgkit._exceptions import (GrammarException, IncorrectGrammar, NotContextFree,
                                SymbolSpaceExhausted, FoundLongRule)
