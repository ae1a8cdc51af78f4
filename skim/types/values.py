"""Runtime values for Skim.

Every value carries exactly one tag: its class. The set of classes is closed
(see `Value` at the bottom) and the evaluator and primitives dispatch on it with
`match` statements. Atoms are frozen; `Pair` is the only mutable datum because
`set-car!` and `set-cdr!` update cons cells in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from math import gcd
from typing import Iterable, Iterator, TextIO, Union

from skim.errors import SkimDivisionByZero, SkimTypeError
from skim.types.procedure import Procedure


class Datum:
    """Mixin giving every value its textual representation."""

    __slots__ = ()

    def render(self, out: TextIO) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        with StringIO() as buffer:
            self.render(buffer)
            return buffer.getvalue()


@dataclass(frozen=True, slots=True)
class Integer(Datum):
    value: int

    def render(self, out: TextIO) -> None:
        out.write(str(self.value))


@dataclass(frozen=True, slots=True)
class Rational(Datum):
    """An exact ratio, always held in lowest terms with a positive denominator.

    Use `skim.numeric.make_rational` to build one from arbitrary parts: it also
    collapses whole ratios into `Integer`.
    """

    numerator: int
    denominator: int

    def __post_init__(self):
        n, d = self.numerator, self.denominator
        if d == 0:
            raise SkimDivisionByZero(f"Division by zero in {n}/{d}")
        if d < 0:
            n, d = -n, -d
        g = gcd(n, d)
        object.__setattr__(self, "numerator", n // g)
        object.__setattr__(self, "denominator", d // g)

    def render(self, out: TextIO) -> None:
        out.write(f"{self.numerator}/{self.denominator}")


@dataclass(frozen=True, slots=True)
class Boolean(Datum):
    value: bool

    def render(self, out: TextIO) -> None:
        out.write("#t" if self.value else "#f")


@dataclass(frozen=True, slots=True)
class String(Datum):
    value: str

    def render(self, out: TextIO) -> None:
        out.write('"')
        out.write(self.value.replace("\\", "\\\\").replace('"', '\\"'))
        out.write('"')


@dataclass(frozen=True, slots=True)
class Symbol(Datum):
    name: str

    def render(self, out: TextIO) -> None:
        out.write(self.name)


@dataclass(frozen=True, slots=True)
class Null(Datum):
    def render(self, out: TextIO) -> None:
        out.write("()")


@dataclass(frozen=True, slots=True)
class Void(Datum):
    def render(self, out: TextIO) -> None:
        out.write("#<void>")


@dataclass(frozen=True, slots=True)
class Terminate(Datum):
    """Produced by (exit); tells the driver to stop."""

    def render(self, out: TextIO) -> None:
        pass


@dataclass(eq=False, slots=True)
class Pair(Datum):
    car: Value
    cdr: Value

    def render(self, out: TextIO) -> None:
        self._write(out, set())

    def _write(self, out: TextIO, active: set[int]) -> None:
        # `active` holds the pairs of every list still being written; meeting
        # one again, through a car or a cdr, is a cycle and prints as "..."
        spine: list[int] = []
        out.write("(")
        node: Value = self
        while isinstance(node, Pair):
            if id(node) in active:
                out.write(" ...")
                break
            if spine:
                out.write(" ")
            active.add(id(node))
            spine.append(id(node))
            _write_element(node.car, out, active)
            node = node.cdr
        else:
            if not isinstance(node, Null):
                out.write(" . ")
                node.render(out)
        out.write(")")
        active.difference_update(spine)


def _write_element(value: Value, out: TextIO, active: set[int]) -> None:
    if not isinstance(value, Pair):
        value.render(out)
    elif id(value) in active:
        out.write("...")
    else:
        value._write(out, active)


Value = Union[Integer, Rational, Boolean, String, Symbol, Null, Void, Pair, Procedure, Terminate]

NULL = Null()
VOID = Void()
TRUE = Boolean(True)
FALSE = Boolean(False)
TERMINATE = Terminate()


def boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def is_true(value: Value) -> bool:
    """Only #f is false; 0, () and void are all true."""
    return not (isinstance(value, Boolean) and value.value is False)


def make_list(values: Iterable[Value], tail: Value = NULL) -> Value:
    """Right fold of cons over `values`, ending in `tail`."""
    result = tail
    for v in reversed(list(values)):
        result = Pair(v, result)
    return result


def iter_list(value: Value) -> Iterator[Value]:
    """Yield the elements of a proper list."""
    seen: set[int] = set()
    while isinstance(value, Pair):
        if id(value) in seen:
            raise SkimTypeError("Circular list")
        seen.add(id(value))
        yield value.car
        value = value.cdr
    if not isinstance(value, Null):
        raise SkimTypeError(f"Not a proper list: ends in {value}")


def is_proper_list(value: Value) -> bool:
    # Floyd's cycle detection; a circular chain is not a list.
    slow = fast = value
    while True:
        if isinstance(fast, Null):
            return True
        if not isinstance(fast, Pair):
            return False
        fast = fast.cdr
        if isinstance(fast, Null):
            return True
        if not isinstance(fast, Pair):
            return False
        fast = fast.cdr
        slow = slow.cdr
        if fast is slow:
            return False
