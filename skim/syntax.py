"""Untyped syntax tree produced by the reader.

Syntax nodes are read-only to the analyzer. A ListSyntax may carry a
SymbolSyntax(".") among its items; only `quote` gives that marker a meaning
(a dotted tail), everywhere else it is an ordinary (and invalid) identifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class NumberSyntax:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True, slots=True)
class RationalSyntax:
    numerator: int
    denominator: int

    def __str__(self):
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True, slots=True)
class StringSyntax:
    value: str

    def __str__(self):
        return f'"{self.value}"'


@dataclass(frozen=True, slots=True)
class SymbolSyntax:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True, slots=True)
class BooleanSyntax:
    value: bool

    def __str__(self):
        return "#t" if self.value else "#f"


@dataclass(frozen=True, slots=True)
class ListSyntax:
    items: tuple[Syntax, ...] = ()

    def __str__(self):
        return "(" + " ".join(str(s) for s in self.items) + ")"


Syntax = Union[NumberSyntax, RationalSyntax, StringSyntax, SymbolSyntax, BooleanSyntax, ListSyntax]

DOT = SymbolSyntax(".")
