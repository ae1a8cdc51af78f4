"""Exact numeric tower: Integer and Rational.

Binary operations dispatch on the ordered pair of operand tags. Commutative
operators normalize Integer/Rational to Rational/Integer; the others spell out
all four combinations. Results are normalized: a ratio is kept in lowest terms
with a positive denominator, and a whole ratio becomes an Integer.
"""

from __future__ import annotations

from typing import Union

from skim.config import integer_bounds
from skim.errors import SkimDivisionByZero, SkimOverflowError, SkimTypeError
from skim.types.values import Integer, Rational, Value

Number = Union[Integer, Rational]

ZERO = Integer(0)
ONE = Integer(1)


def make_rational(numerator: int, denominator: int) -> Number:
    if denominator == 0:
        raise SkimDivisionByZero(f"Division by zero in {numerator}/{denominator}")
    r = Rational(numerator, denominator)
    if r.denominator == 1:
        return Integer(r.numerator)
    return r


def is_number(value: Value) -> bool:
    return isinstance(value, (Integer, Rational))


def _wrong_types(op: str, a: Value, b: Value) -> SkimTypeError:
    return SkimTypeError(f"Wrong typename: ({op} {a} {b})")


def add(a: Value, b: Value) -> Number:
    match a, b:
        case Integer(x), Integer(y):
            return Integer(x + y)
        case Rational(n1, d1), Rational(n2, d2):
            return make_rational(n1 * d2 + n2 * d1, d1 * d2)
        case Rational(n, d), Integer(y):
            return make_rational(n + d * y, d)
        case Integer(), Rational():
            return add(b, a)
    raise _wrong_types("+", a, b)


def sub(a: Value, b: Value) -> Number:
    match a, b:
        case Integer(x), Integer(y):
            return Integer(x - y)
        case Rational(n1, d1), Rational(n2, d2):
            return make_rational(n1 * d2 - n2 * d1, d1 * d2)
        case Rational(n, d), Integer(y):
            return make_rational(n - d * y, d)
        case Integer(x), Rational(n, d):
            return make_rational(x * d - n, d)
    raise _wrong_types("-", a, b)


def mul(a: Value, b: Value) -> Number:
    match a, b:
        case Integer(x), Integer(y):
            return Integer(x * y)
        case Rational(n1, d1), Rational(n2, d2):
            return make_rational(n1 * n2, d1 * d2)
        case Rational(n, d), Integer(y):
            return make_rational(n * y, d)
        case Integer(), Rational():
            return mul(b, a)
    raise _wrong_types("*", a, b)


def div(a: Value, b: Value) -> Number:
    match a, b:
        case Integer(x), Integer(y):
            if y == 0:
                raise SkimDivisionByZero("Division by zero")
            if x % y == 0:
                return Integer(x // y)
            return make_rational(x, y)
        case Rational(n1, d1), Rational(n2, d2):
            return make_rational(n1 * d2, d1 * n2)
        case Rational(n, d), Integer(y):
            if y == 0:
                raise SkimDivisionByZero("Division by zero")
            return make_rational(n, d * y)
        case Integer(x), Rational(n, d):
            return make_rational(x * d, n)
    raise _wrong_types("/", a, b)


def negate(a: Value) -> Number:
    return sub(ZERO, a)


def modulo(a: Value, b: Value) -> Integer:
    """Remainder of truncating division: the result takes the dividend's sign."""
    match a, b:
        case Integer(x), Integer(y):
            if y == 0:
                raise SkimDivisionByZero("Division by zero")
            r = abs(x) % abs(y)
            return Integer(-r if x < 0 else r)
    raise SkimTypeError(f"modulo is only defined for integers: (modulo {a} {b})")


def expt(a: Value, b: Value) -> Integer:
    """Binary exponentiation over integers, checked against the integer width."""
    match a, b:
        case Integer(base), Integer(exponent):
            pass
        case _:
            raise _wrong_types("expt", a, b)
    if exponent < 0:
        raise SkimTypeError("Negative exponent not supported for integers")
    if base == 0 and exponent == 0:
        raise SkimTypeError("0^0 is undefined")

    lo, hi = integer_bounds()
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
            if not lo <= result <= hi:
                raise SkimOverflowError("Integer overflow in expt")
        exponent >>= 1
        if exponent:
            base *= base
            if not lo <= base <= hi:
                raise SkimOverflowError("Integer overflow in expt")
    return Integer(result)


def compare(a: Value, b: Value) -> int:
    """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
    match a, b:
        case Integer(x), Integer(y):
            left, right = x, y
        case Rational(n, d), Integer(y):
            left, right = n, y * d
        case Integer(x), Rational(n, d):
            left, right = x * d, n
        case Rational(n1, d1), Rational(n2, d2):
            left, right = n1 * d2, n2 * d1
        case _:
            raise SkimTypeError(f"Wrong typename in numeric comparison: {a}, {b}")
    return (left > right) - (left < right)
