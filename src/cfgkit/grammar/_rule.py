from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from cfgkit.symbols import Symbol, Word, word

"""
A production lhs -> rhs. Both sides are words; either can be given as a string
of single character symbols, so Rule("S", "AB") and Rule("S", "") (the empty
production) are valid shorthands.
"""
@dataclass(frozen=True)
class Rule():
    lhs: Word
    rhs: Word

    def __init__(self, lhs: Iterable[int | str | Symbol], rhs: Iterable[int | str | Symbol]):
        object.__setattr__(self, "lhs", word(lhs))
        object.__setattr__(self, "rhs", word(rhs))

    @property
    def symbols(self) -> Word:
        return self.lhs + self.rhs

    def __str__(self):
        lhs = "".join(map(str, self.lhs))
        rhs = "".join(map(str, self.rhs)) if self.rhs else "<eps>"
        return f"{lhs} -> {rhs}"
