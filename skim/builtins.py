"""Primitive procedures.

Each primitive is registered once, at import, in the read-only PRIMITIVES
table. The analyzer consults it to build primitive call nodes, and the
evaluator to give a primitive name value-hood as a procedure.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from skim.errors import SkimArityError, SkimTypeError
from skim.numeric import ONE, ZERO, add, compare, div, expt, is_number, modulo, mul, negate, sub
from skim.types.procedure import Procedure
from skim.types.values import (
    NULL,
    TERMINATE,
    VOID,
    Boolean,
    Integer,
    Null,
    Pair,
    Rational,
    String,
    Symbol,
    Value,
    Void,
    boolean,
    is_proper_list,
    make_list,
)


@dataclass(frozen=True, slots=True)
class Primitive:
    name: str
    function: Callable[[list[Value]], Value]
    min_args: int
    max_args: Optional[int]
    # value of the call with no operands, when that folds to a constant
    unit: Optional[Value] = None

    @property
    def fixed(self) -> bool:
        return self.max_args == self.min_args

    def accepts(self, count: int) -> bool:
        if count < self.min_args:
            return False
        return self.max_args is None or count <= self.max_args

    def describe_arity(self) -> str:
        if self.fixed:
            return f"exactly {self.min_args}"
        if self.max_args is None:
            return f"at least {self.min_args}"
        return f"between {self.min_args} and {self.max_args}"

    def __call__(self, args: list[Value]) -> Value:
        if not self.accepts(len(args)):
            raise SkimArityError(
                f"{self.name} requires {self.describe_arity()} argument(s), got {len(args)}"
            )
        return self.function(args)

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"


# -------------------------------
# Arithmetic
# -------------------------------
def plus(args: list[Value]) -> Value:
    result: Value = ZERO
    for x in args:
        result = add(result, x)
    return result


def minus(args: list[Value]) -> Value:
    if len(args) == 1:
        return negate(args[0])
    result = args[0]
    for x in args[1:]:
        result = sub(result, x)
    return result


def times(args: list[Value]) -> Value:
    result: Value = ONE
    for x in args:
        result = mul(result, x)
    return result


def divide(args: list[Value]) -> Value:
    if len(args) == 1:
        return div(ONE, args[0])
    result = args[0]
    for x in args[1:]:
        result = div(result, x)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, holds: Callable[[int], bool]) -> Callable[[list[Value]], Value]:
    def compare_chain(args: list[Value]) -> Value:
        for x in args:
            if not is_number(x):
                raise SkimTypeError(f"{name} expects numbers, got {x}")
        return boolean(all(holds(compare(a, b)) for a, b in zip(args, args[1:])))

    compare_chain.__name__ = f"compare_{name}"
    return compare_chain


# -------------------------------
# Pairs and lists
# -------------------------------
def _pair(name: str, value: Value) -> Pair:
    if not isinstance(value, Pair):
        raise SkimTypeError(f"{name}: not a pair: {value}")
    return value


def cons(args: list[Value]) -> Value:
    return Pair(args[0], args[1])


def car(args: list[Value]) -> Value:
    return _pair("car", args[0]).car


def cdr(args: list[Value]) -> Value:
    return _pair("cdr", args[0]).cdr


def set_car(args: list[Value]) -> Value:
    _pair("set-car!", args[0]).car = args[1]
    return VOID


def set_cdr(args: list[Value]) -> Value:
    _pair("set-cdr!", args[0]).cdr = args[1]
    return VOID


def list_builtin(args: list[Value]) -> Value:
    return make_list(args)


# -------------------------------
# Equality and predicates
# -------------------------------
def is_eq(a: Value, b: Value) -> bool:
    match a, b:
        case Integer(x), Integer(y):
            return x == y
        case Rational(), Rational():
            return a == b
        case Boolean(x), Boolean(y):
            return x == y
        case Symbol(x), Symbol(y):
            return x == y
        case Null(), Null():
            return True
        case Void(), Void():
            return True
    return a is b


def eq(args: list[Value]) -> Value:
    return boolean(is_eq(args[0], args[1]))


def _predicate(test: Callable[[Value], bool]) -> Callable[[list[Value]], Value]:
    return lambda args: boolean(test(args[0]))


def logical_not(args: list[Value]) -> Value:
    return boolean(args[0] == Boolean(False))


# -------------------------------
# Control and output
# -------------------------------
def make_void(args: list[Value]) -> Value:
    return VOID


def terminate(args: list[Value]) -> Value:
    return TERMINATE


def display(args: list[Value]) -> Value:
    value = args[0]
    if isinstance(value, String):
        sys.stdout.write(value.value)
    else:
        value.render(sys.stdout)
    return VOID


# -------------------------------
# Registration
# -------------------------------
def _build(*primitives: Primitive) -> Mapping[str, Primitive]:
    return MappingProxyType({p.name: p for p in primitives})


PRIMITIVES: Mapping[str, Primitive] = _build(
    Primitive("+", plus, 0, None, unit=ZERO),
    Primitive("-", minus, 1, None),
    Primitive("*", times, 0, None, unit=ONE),
    Primitive("/", divide, 1, None),
    Primitive("modulo", lambda args: modulo(args[0], args[1]), 2, 2),
    Primitive("expt", lambda args: expt(args[0], args[1]), 2, 2),
    Primitive("<", _chain("<", lambda c: c < 0), 2, None),
    Primitive("<=", _chain("<=", lambda c: c <= 0), 2, None),
    Primitive("=", _chain("=", lambda c: c == 0), 2, None),
    Primitive(">=", _chain(">=", lambda c: c >= 0), 2, None),
    Primitive(">", _chain(">", lambda c: c > 0), 2, None),
    Primitive("cons", cons, 2, 2),
    Primitive("car", car, 1, 1),
    Primitive("cdr", cdr, 1, 1),
    Primitive("set-car!", set_car, 2, 2),
    Primitive("set-cdr!", set_cdr, 2, 2),
    Primitive("list", list_builtin, 0, None, unit=NULL),
    Primitive("list?", _predicate(is_proper_list), 1, 1),
    Primitive("eq?", eq, 2, 2),
    Primitive("boolean?", _predicate(lambda v: isinstance(v, Boolean)), 1, 1),
    Primitive("number?", _predicate(is_number), 1, 1),
    Primitive("null?", _predicate(lambda v: isinstance(v, Null)), 1, 1),
    Primitive("pair?", _predicate(lambda v: isinstance(v, Pair)), 1, 1),
    Primitive("procedure?", _predicate(lambda v: isinstance(v, Procedure)), 1, 1),
    Primitive("symbol?", _predicate(lambda v: isinstance(v, Symbol)), 1, 1),
    Primitive("string?", _predicate(lambda v: isinstance(v, String)), 1, 1),
    Primitive("not", logical_not, 1, 1),
    Primitive("void", make_void, 0, 0, unit=VOID),
    Primitive("exit", terminate, 0, 0, unit=TERMINATE),
    Primitive("display", display, 1, 1),
)
