from __future__ import annotations
from typing import Iterable

from cfgkit.symbols import Symbol, Alphabet, alphabet
from cfgkit.grammar._rule import Rule
from cfgkit.logging import Logger
from cfgkit._exceptions import IncorrectGrammar

class Grammar():
    """
    A grammar over integer coded symbols. Rules may have any non-empty left
    hand side containing at least one nonterminal, so unrestricted grammars are
    representable; ContextFreeGrammar narrows this down.

    The grammar also mints fresh symbols. Every new symbol is one greater than
    the largest symbol the grammar has ever seen, so it cannot collide with a
    symbol supplied by the caller or minted before.
    """

    def __init__(self,
            terminals: Iterable[int | str | Symbol],
            nonterminals: Iterable[int | str | Symbol],
            start_symbol: int | str | Symbol,
            rules: Iterable[Rule | tuple],
            debug: bool = False):

        self.debug = debug
        self.logger = Logger.for_component(file="grammar", tag=type(self).__name__, debug=debug)

        self.terminals: Alphabet = alphabet(terminals)
        self.nonterminals: Alphabet = alphabet(nonterminals)
        self.start_symbol = Symbol(start_symbol)
        self.rules: list[Rule] = [r if isinstance(r, Rule) else Rule(*r) for r in rules]

        problem = self._find_problem()
        if problem is not None:
            self.logger.raise_exception(f"Grammar is incorrect: {problem}", IncorrectGrammar)

        self._max_symbol = max([Symbol(0), *self.terminals, *self.nonterminals])

    def __str__(self):
        return "".join(str(rule) + "\n" for rule in self.rules)

    def copy(self) -> Grammar:
        grammar = object.__new__(type(self))
        grammar.__dict__.update(self.__dict__)
        grammar.terminals = set(self.terminals)
        grammar.nonterminals = set(self.nonterminals)
        grammar.rules = list(self.rules)
        return grammar

    def is_context_free(self) -> bool:
        return all(len(rule.lhs) == 1 and self.symbol_is_nonterminal(rule.lhs[0])
            for rule in self.rules)

    def symbol_is_terminal(self, symbol: int | str | Symbol) -> bool:
        return Symbol(symbol) in self.terminals

    def symbol_is_nonterminal(self, symbol: int | str | Symbol) -> bool:
        return Symbol(symbol) in self.nonterminals

    def symbol_is_correct(self, symbol: int | str | Symbol) -> bool:
        return self.symbol_is_terminal(symbol) or self.symbol_is_nonterminal(symbol)

    def rule_is_correct(self, rule: Rule) -> bool:
        return self._find_rule_problem(rule) is None

    def is_correct(self) -> bool:
        return self._find_problem() is None

    def _find_rule_problem(self, rule: Rule) -> str | None:
        if not rule.lhs:
            return f"rule '{rule}' has an empty left hand side"

        unknown = [s for s in rule.symbols if not self.symbol_is_correct(s)]
        if unknown:
            return f"rule '{rule}' uses unknown symbol '{unknown[0]}'"

        if not any(map(self.symbol_is_nonterminal, rule.lhs)):
            return f"left hand side of rule '{rule}' has no nonterminal"
        return None

    def _find_problem(self) -> str | None:
        if not self.symbol_is_nonterminal(self.start_symbol):
            return f"start symbol '{self.start_symbol}' is not a nonterminal"

        shared = sorted(self.terminals & self.nonterminals)
        if shared:
            return f"symbol '{shared[0]}' is both a terminal and a nonterminal"

        for rule in self.rules:
            problem = self._find_rule_problem(rule)
            if problem is not None:
                return problem
        return None

    def _mint_symbol(self) -> Symbol:
        # Symbol.next raises SymbolSpaceExhausted once max_value has been used
        self._max_symbol = self._max_symbol.next()
        return self._max_symbol

    def add_new_terminal(self) -> Symbol:
        symbol = self._mint_symbol()
        self.terminals.add(symbol)
        self.logger.log_debug(f"minted terminal {symbol!r}")
        return symbol

    def add_new_nonterminal(self) -> Symbol:
        symbol = self._mint_symbol()
        self.nonterminals.add(symbol)
        self.logger.log_debug(f"minted nonterminal {symbol!r}")
        return symbol
