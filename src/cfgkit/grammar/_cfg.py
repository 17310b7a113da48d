from __future__ import annotations
import functools
from typing import Iterable

from cfgkit.symbols import Symbol
from cfgkit.grammar._rule import Rule
from cfgkit.grammar._grammar import Grammar
from cfgkit.grammar._cfgnormalizer import CFGNormalizer
from cfgkit._exceptions import NotContextFree, FoundLongRule

def requires_short_rules(f):
    @functools.wraps(f)
    def wrapper(self: ContextFreeGrammar, *args, **kwargs):
        if self.has_long_rules():
            self.logger.raise_exception(
                f"{f.__name__} expects only rules with at most two symbols on the right",
                FoundLongRule)
        return f(self, *args, **kwargs)
    return wrapper

def _unique(rules: Iterable[Rule]) -> list[Rule]:
    return list(dict.fromkeys(rules))

class ContextFreeGrammar(Grammar):
    """
    A grammar whose every left hand side is a single nonterminal. Can be brought
    into Chomsky Normal Form, where each rule is one of

        A -> a      a terminal
        A -> B C    B and C nonterminals other than the start symbol
        S -> <eps>  only for the start symbol S

    Normalization runs six rewriting passes in a fixed order (see CFGNormalizer).
    Each pass replaces the rule list with a rewritten one and keeps the language.
    """

    def __init__(self,
            terminals: Grammar | Iterable[int | str | Symbol],
            nonterminals: Iterable[int | str | Symbol] = None,
            start_symbol: int | str | Symbol = None,
            rules: Iterable[Rule | tuple] = None,
            debug: bool = False):

        if isinstance(terminals, Grammar):
            grammar = terminals
            if nonterminals is not None or start_symbol is not None or rules is not None:
                raise TypeError("ContextFreeGrammar takes either a Grammar or its parts, not both")

            super().__init__(grammar.terminals, grammar.nonterminals, grammar.start_symbol,
                grammar.rules, debug=debug or grammar.debug)
            self._max_symbol = max(self._max_symbol, grammar._max_symbol)
        else:
            super().__init__(terminals, nonterminals, start_symbol, rules or [], debug=debug)

        if not self.is_context_free():
            offending = next(r for r in self.rules
                if len(r.lhs) != 1 or not self.symbol_is_nonterminal(r.lhs[0]))
            self.logger.raise_exception(
                f"Grammar is not context-free: left hand side of '{offending}' is not a single nonterminal",
                NotContextFree)

    def is_chain_rule(self, rule: Rule) -> bool:
        return len(rule.rhs) == 1 and self.symbol_is_nonterminal(rule.rhs[0])

    def is_cnf_rule(self, rule: Rule) -> bool:
        match len(rule.rhs):
            case 0: return rule.lhs[0] == self.start_symbol
            case 1: return self.symbol_is_terminal(rule.rhs[0])
            case 2: return all(self.symbol_is_nonterminal(s) and s != self.start_symbol
                for s in rule.rhs)
            case _: return False

    def is_normalized(self) -> bool:
        return all(map(self.is_cnf_rule, self.rules))

    def normalize(self) -> None:
        if self.is_normalized():
            return

        CFGNormalizer(debug=self.debug).run(self)

    def normalized(self) -> ContextFreeGrammar:
        copy = self.copy()
        copy.normalize()
        return copy

    def has_long_rules(self) -> bool:
        return any(len(rule.rhs) > 2 for rule in self.rules)

    # A -> X1 X2 ... Xn becomes A -> X1 N1, N1 -> X2 N2, ..., N(n-2) -> X(n-1) Xn
    def remove_long_rules(self) -> None:
        rewritten = []
        for rule in self.rules:
            if len(rule.rhs) <= 2:
                rewritten.append(rule)
                continue

            lhs = rule.lhs
            for symbol in rule.rhs[:-2]:
                connector = self.add_new_nonterminal()
                rewritten.append(Rule(lhs, (symbol, connector)))
                lhs = (connector,)
            rewritten.append(Rule(lhs, rule.rhs[-2:]))

        self.rules = _unique(rewritten)

    @requires_short_rules
    def find_epsilon_generators(self) -> set[Symbol]:
        generators = {rule.lhs[0] for rule in self.rules if not rule.rhs}
        while True:
            size = len(generators)
            for rule in self.rules:
                if rule.rhs and all(s in generators for s in rule.rhs):
                    generators.add(rule.lhs[0])
            if size == len(generators):
                return generators

    @requires_short_rules
    def remove_empty_rules(self) -> None:
        generators = self.find_epsilon_generators()
        rewritten = []
        for rule in self.rules:
            if not rule.rhs:
                continue

            rewritten.append(rule)
            if len(rule.rhs) == 2:
                for i, symbol in enumerate(rule.rhs):
                    if symbol in generators:
                        rewritten.append(Rule(rule.lhs, rule.rhs[1 - i : 2 - i]))

        # the start symbol may not occur on a right hand side in normal form, and
        # it is the only symbol allowed to keep an empty rule
        start_is_nullable = self.start_symbol in generators
        start_is_used = any(self.start_symbol in rule.rhs for rule in rewritten)
        if start_is_nullable or start_is_used:
            new_start_symbol = self.add_new_nonterminal()
            if start_is_nullable:
                rewritten.append(Rule((new_start_symbol,), ()))
            rewritten.append(Rule((new_start_symbol,), (self.start_symbol,)))
            self.start_symbol = new_start_symbol

        self.rules = _unique(rewritten)

    # pairs (A, B) such that B can be derived from A using only chain rules
    def find_chained_pairs(self) -> list[tuple[Symbol, Symbol]]:
        chain_rules = [(rule.lhs[0], rule.rhs[0]) for rule in self.rules if self.is_chain_rule(rule)]
        pairs = _unique(chain_rules)
        found = set(pairs)

        found_new_pairs = True
        while found_new_pairs:
            found_new_pairs = False
            for start, end in list(pairs):
                for lhs, rhs in chain_rules:
                    if lhs == end and (start, rhs) not in found:
                        found.add((start, rhs))
                        pairs.append((start, rhs))
                        found_new_pairs = True

        return pairs

    def remove_chain_rules(self) -> None:
        pairs = self.find_chained_pairs()
        surviving = [rule for rule in self.rules if not self.is_chain_rule(rule)]

        rewritten = list(surviving)
        for start, end in pairs:
            rewritten += [Rule((start,), rule.rhs) for rule in surviving if rule.lhs[0] == end]

        self.rules = _unique(rewritten)

    def _nonterminals_in(self, rule: Rule) -> list[Symbol]:
        return [s for s in rule.rhs if self.symbol_is_nonterminal(s)]

    @requires_short_rules
    def find_generating_nonterminals(self) -> set[Symbol]:
        generating = {rule.lhs[0] for rule in self.rules if not self._nonterminals_in(rule)}
        while True:
            size = len(generating)
            for rule in self.rules:
                if all(s in generating for s in self._nonterminals_in(rule)):
                    generating.add(rule.lhs[0])
            if size == len(generating):
                return generating

    def _rules_using_only(self, nonterminals: set[Symbol]) -> list[Rule]:
        return [rule for rule in self.rules
            if rule.lhs[0] in nonterminals
                and all(s in nonterminals for s in self._nonterminals_in(rule))]

    @requires_short_rules
    def remove_non_generating_rules(self) -> None:
        self.rules = _unique(self._rules_using_only(self.find_generating_nonterminals()))

    def find_reachable_nonterminals(self) -> set[Symbol]:
        reachable = {self.start_symbol}
        while True:
            size = len(reachable)
            for rule in self.rules:
                if rule.lhs[0] in reachable:
                    reachable.update(self._nonterminals_in(rule))
            if size == len(reachable):
                return reachable

    def remove_non_reachable_rules(self) -> None:
        self.rules = _unique(self._rules_using_only(self.find_reachable_nonterminals()))

    # terminals inside two symbol right hand sides are replaced by a helper
    # nonterminal T with the single rule T -> terminal
    @requires_short_rules
    def remove_mixed_rules(self) -> None:
        rewritten = []
        helpers: dict[Symbol, Symbol] = {}

        def helper_for(terminal: Symbol) -> Symbol:
            if terminal not in helpers:
                helpers[terminal] = self.add_new_nonterminal()
                rewritten.append(Rule((helpers[terminal],), (terminal,)))
            return helpers[terminal]

        for rule in self.rules:
            if len(rule.rhs) < 2 or not any(map(self.symbol_is_terminal, rule.rhs)):
                rewritten.append(rule)
                continue

            rhs = tuple(helper_for(s) if self.symbol_is_terminal(s) else s for s in rule.rhs)
            rewritten.append(Rule(rule.lhs, rhs))

        self.rules = _unique(rewritten)
