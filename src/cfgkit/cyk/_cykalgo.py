from __future__ import annotations
from typing import Iterable

from cfgkit.symbols import Symbol, Word, word as make_word
from cfgkit.grammar import ContextFreeGrammar
from cfgkit.logging import Logger

# generates_subword[nonterminal][i][j] is True if nonterminal derives word[i..j]
Table = dict[Symbol, list[list[bool]]]

class RuleQuery():
    """
    Index of a normalized grammar: for every nonterminal, the terminals it
    rewrites to directly and the pairs of nonterminals it rewrites to.
    """

    def __init__(self, cfg: ContextFreeGrammar):
        self.cfg = cfg
        self.terminal_children: dict[Symbol, set[Symbol]] = {}
        self.nonterminal_children: dict[Symbol, list[Word]] = {}
        self._init_lookup_tables()

    def _init_lookup_tables(self):
        for nonterminal in self.cfg.nonterminals:
            self.terminal_children[nonterminal] = set()
            self.nonterminal_children[nonterminal] = []

        for rule in self.cfg.rules:
            key = rule.lhs[0]
            match len(rule.rhs):
                case 1 if self.cfg.symbol_is_terminal(rule.rhs[0]):
                    self.terminal_children[key].add(rule.rhs[0])
                case 2:
                    self.nonterminal_children[key].append(rule.rhs)

    def generates_terminal(self, nonterminal: Symbol, terminal: Symbol) -> bool:
        return terminal in self.terminal_children[nonterminal]

    def get_pairs(self, nonterminal: Symbol) -> list[Word]:
        return self.nonterminal_children[nonterminal]

class CYK():
    """
    Decides membership of words in the language of a context free grammar.

    The grammar is normalized once, on construction, into a private copy; the
    grammar passed in is left as it is. Each call to predict builds its own table.
    """

    def __init__(self, grammar: ContextFreeGrammar, debug: bool = False):
        self.logger = Logger.for_component(file="cyk", tag=type(self).__name__, debug=debug)
        self._grammar = grammar.normalized()
        self.query = RuleQuery(self._grammar)
        self.logger.log(f"initialized with {len(self._grammar.rules)} normalized rules")

    @property
    def grammar(self) -> ContextFreeGrammar:
        return self._grammar

    def predict(self, word: str | Iterable[int | str | Symbol]) -> bool:
        word = make_word(word)
        if not word:
            return self.accepts_empty_word()

        generates_subword = self.calculate_table_values(word)
        accepted = generates_subword[self._grammar.start_symbol][0][len(word) - 1]
        self.logger.log_debug(f"{'accept' if accepted else 'reject'} '{''.join(map(str, word))}'")
        return accepted

    # normalization gives the start symbol an empty rule exactly when the start
    # symbol of the grammar it was given derives the empty word
    def accepts_empty_word(self) -> bool:
        return any(rule.lhs[0] == self._grammar.start_symbol and not rule.rhs
            for rule in self._grammar.rules)

    def init_table(self, word: Word) -> Table:
        n = len(word)
        generates_subword: Table = {}
        for nonterminal in self._grammar.nonterminals:
            generates_subword[nonterminal] = [[False] * n for _ in range(n)]
            for i, symbol in enumerate(word):
                generates_subword[nonterminal][i][i] = self.query.generates_terminal(nonterminal, symbol)

        return generates_subword

    def check_if_nonterminal_generates_subword(self,
            nonterminal: Symbol,
            generates_subword: Table,
            subword_start: int,
            subword_size: int) -> None:

        subword_end = subword_start + subword_size - 1
        generates_subword[nonterminal][subword_start][subword_end] = any(
            generates_subword[left][subword_start][split]
                and generates_subword[right][split + 1][subword_end]
            for left, right in self.query.get_pairs(nonterminal)
            for split in range(subword_start, subword_end))

    def calculate_table_values(self, word: str | Iterable[int | str | Symbol]) -> Table:
        word = make_word(word)
        generates_subword = self.init_table(word)

        for subword_size in range(2, len(word) + 1):
            for subword_start in range(len(word) - subword_size + 1):
                for nonterminal in self._grammar.nonterminals:
                    self.check_if_nonterminal_generates_subword(
                        nonterminal,
                        generates_subword,
                        subword_start,
                        subword_size)

        return generates_subword
