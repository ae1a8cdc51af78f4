"""Expression tree produced by the analyzer.

Nodes are frozen once built, so one tree can be evaluated any number of times
against different environments; closures rely on this.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from skim.syntax import Syntax
from skim.types.values import Value

if TYPE_CHECKING:
    from skim.builtins import Primitive


@dataclass(frozen=True, slots=True)
class Literal:
    """A self-evaluating constant: integer, rational, string, boolean, void or exit."""
    value: Value


@dataclass(frozen=True, slots=True)
class Var:
    name: str


@dataclass(frozen=True, slots=True)
class UnaryCall:
    primitive: Primitive
    operand: Expression


@dataclass(frozen=True, slots=True)
class BinaryCall:
    primitive: Primitive
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class VariadicCall:
    primitive: Primitive
    operands: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class SpreadCall:
    """Calls `primitive` with the elements of the list bound to `parameter`."""
    primitive: Primitive
    parameter: str


@dataclass(frozen=True, slots=True)
class Quote:
    datum: Syntax


@dataclass(frozen=True, slots=True)
class If:
    test: Expression
    consequent: Expression
    alternative: Optional[Expression] = None


@dataclass(frozen=True, slots=True)
class CondClause:
    test: Optional[Expression]  # None for the else clause
    body: tuple[Expression, ...]

    @property
    def is_else(self) -> bool:
        return self.test is None


@dataclass(frozen=True, slots=True)
class Cond:
    clauses: tuple[CondClause, ...]


@dataclass(frozen=True, slots=True)
class Begin:
    body: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class And:
    operands: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class Or:
    operands: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class Lambda:
    parameters: tuple[str, ...]
    body: Expression


@dataclass(frozen=True, slots=True)
class Define:
    name: str
    value: Expression


@dataclass(frozen=True, slots=True)
class Let:
    bindings: tuple[tuple[str, Expression], ...]
    body: Expression


@dataclass(frozen=True, slots=True)
class Letrec:
    bindings: tuple[tuple[str, Expression], ...]
    body: Expression


@dataclass(frozen=True, slots=True)
class Set:
    name: str
    value: Expression


@dataclass(frozen=True, slots=True)
class Apply:
    operator: Expression
    operands: tuple[Expression, ...]


Expression = Union[
    Literal, Var, UnaryCall, BinaryCall, VariadicCall, SpreadCall, Quote, If, Cond,
    Begin, And, Or, Lambda, Define, Let, Letrec, Set, Apply,
]
