from __future__ import annotations
import functools
from typing import Iterable

from cfgkit._exceptions import SymbolSpaceExhausted

"""
An atom of a grammar. A symbol is only an integer code; whether it is a terminal
or a nonterminal depends on the grammar it is used in.
"""
@functools.total_ordering
class Symbol():
    __slots__ = ("raw_value",)

    max_value = 2**31 - 1

    def __init__(self, value: int | str | Symbol):
        match value:
            case Symbol(): raw_value = value.raw_value
            case str() if len(value) == 1: raw_value = ord(value)
            case str(): raise ValueError(f"symbol must be a single character, got '{value}'")
            case bool(): raise ValueError(f"cannot make a symbol from {value}")
            case int(): raw_value = value
            case _: raise ValueError(f"cannot make a symbol from {value!r}")

        if not 0 <= raw_value <= Symbol.max_value:
            raise ValueError(f"symbol value {raw_value} outside of [0, {Symbol.max_value}]")
        self.raw_value = raw_value

    def next(self) -> Symbol:
        if self.raw_value == Symbol.max_value:
            raise SymbolSpaceExhausted(f"no symbol after {Symbol.max_value}")
        return Symbol(self.raw_value + 1)

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Symbol):
            return NotImplemented
        return self.raw_value == __o.raw_value

    def __lt__(self, __o: Symbol) -> bool:
        if not isinstance(__o, Symbol):
            return NotImplemented
        return self.raw_value < __o.raw_value

    def __hash__(self) -> int:
        return hash(self.raw_value)

    def __str__(self) -> str:
        if self.raw_value < 0x110000 and chr(self.raw_value).isprintable():
            return chr(self.raw_value)
        return f"<{self.raw_value}>"

    def __repr__(self) -> str:
        return f"Symbol({str(self)!r})"

Alphabet = set[Symbol]
Word = tuple[Symbol, ...]

def alphabet(symbols: Iterable[int | str | Symbol]) -> Alphabet:
    return {Symbol(s) for s in symbols}

def word(symbols: Iterable[int | str | Symbol]) -> Word:
    return tuple(Symbol(s) for s in symbols)
