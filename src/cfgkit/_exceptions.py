from __future__ import annotations

class GrammarException(Exception):
    description = "grammar error"

    def __init__(self, msg: str = None, *args: object) -> None:
        self.msg = msg if msg is not None else self.description
        super().__init__(self.msg, *args)

    def __str__(self) -> str:
        return self.msg

class IncorrectGrammar(GrammarException):
    description = "Grammar is incorrect"

class NotContextFree(GrammarException):
    description = "Grammar is not context-free"

class SymbolSpaceExhausted(GrammarException):
    description = "Grammar exceeded symbol limit"

# raised when a normalization step that only handles rules with at most two
# symbols on the right is called before long rules were removed
class FoundLongRule(GrammarException):
    description = "This function expects only short rules"
