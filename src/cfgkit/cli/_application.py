from __future__ import annotations
from typing import TextIO

from cfgkit.config import Config
from cfgkit.grammar import Rule, ContextFreeGrammar, GrammarException
from cfgkit.cyk import CYK
from cfgkit.logging import Logger

class InputReader():
    """
    Reads a text stream the way a terminal user types into it: either one
    character at a time, skipping whitespace, or one whitespace separated token
    at a time. Both return None at the end of the stream.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    def _next_non_whitespace(self) -> str | None:
        while True:
            c = self.stream.read(1)
            if not c:
                return None
            if not c.isspace():
                return c

    def next_char(self) -> str | None:
        return self._next_non_whitespace()

    def next_token(self) -> str | None:
        c = self._next_non_whitespace()
        if c is None:
            return None

        token = c
        while True:
            c = self.stream.read(1)
            if not c or c.isspace():
                return token
            token += c

class Application():
    def __init__(self,
            config: Config,
            stdin: TextIO,
            stdout: TextIO,
            debug: bool = False,
            show_grammar: bool = False):

        self.config = config
        self.reader = InputReader(stdin)
        self.stdout = stdout
        self.debug = debug
        self.show_grammar = show_grammar
        self.logger = Logger.for_component(file="application", tag=type(self).__name__, debug=debug)

    def _print(self, msg: str, end: str = "\n") -> None:
        self.stdout.write(msg + end)
        self.stdout.flush()

    def _prompt(self, msg: str) -> None:
        self._print(msg, end="")

    def _read_symbols(self) -> list[str]:
        symbols = []
        while True:
            c = self.reader.next_char()
            if c is None or c == self.config.input_separator:
                return symbols
            symbols.append(c)

    def _read_rules(self) -> list[Rule] | None:
        rules = []
        while True:
            lhs = self.reader.next_token()
            if lhs is None or lhs == self.config.input_separator:
                return rules

            rhs = self.reader.next_token()
            if rhs is None:
                self._print(f"Rule '{lhs}' has no right hand side")
                return None
            rules.append(Rule(lhs, "" if rhs == self.config.epsilon_token else rhs))

    def _build(self, terminals, nonterminals, start_symbol, rules) -> CYK | None:
        try:
            grammar = ContextFreeGrammar(terminals, nonterminals, start_symbol, rules, debug=self.debug)
            cyk = CYK(grammar, debug=self.debug)
        except GrammarException as e:
            self.logger.log_error(f"could not build grammar: {e}")
            self._print(str(e))
            return None

        if self.show_grammar:
            self._print(f"Normalized grammar (start symbol {cyk.grammar.start_symbol}):")
            self._print(str(cyk.grammar), end="")
        return cyk

    def _test_words(self, cyk: CYK) -> None:
        while True:
            self._prompt("Word to test: ")
            word = self.reader.next_token()
            if word is None or word == self.config.input_separator:
                self._print("")
                return

            if word == self.config.epsilon_token:
                word = ""
            self._print("accept" if cyk.predict(word) else "reject")

    def run(self) -> int:
        separator = self.config.input_separator
        self._print(f"(Use {separator} to end input)")

        self._prompt("Terminals: ")
        terminals = self._read_symbols()

        self._prompt("Nonterminals: ")
        nonterminals = self._read_symbols()

        self._prompt("Start symbol: ")
        start_symbol = self.reader.next_char()
        if start_symbol is None:
            self._print("Unexpected end of input, no start symbol given")
            return 1

        self._prompt(f"Rules (lhs[space]rhs|{self.config.epsilon_token}): ")
        rules = self._read_rules()
        if rules is None:
            return 1

        cyk = self._build(terminals, nonterminals, start_symbol, rules)
        if cyk is None:
            return 1

        self._test_words(cyk)
        return 0
