import io

import pytest

from skim.errors import SkimDivisionByZero
from skim.types.environment import Environment
from skim.types.procedure import Procedure
from skim.expressions import Literal
from skim.types.values import (
    FALSE,
    NULL,
    TERMINATE,
    TRUE,
    VOID,
    Integer,
    Pair,
    Rational,
    String,
    Symbol,
    make_list,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (Integer(-3), "-3"),
        (Rational(2, 4), "1/2"),
        (Rational(1, -2), "-1/2"),
        (Rational(-3, -9), "1/3"),
        (TRUE, "#t"),
        (FALSE, "#f"),
        (String("hi"), '"hi"'),
        (String('a"b'), '"a\\"b"'),
        (Symbol("foo"), "foo"),
        (NULL, "()"),
        (VOID, "#<void>"),
        (TERMINATE, ""),
        (Procedure(("x",), Literal(VOID), Environment()), "#<procedure>"),
        (Pair(Integer(1), Integer(2)), "(1 . 2)"),
        (make_list([make_list([Integer(1), Integer(2)]), Integer(3)]), "((1 2) 3)"),
        (make_list([Integer(1), Integer(2)], Symbol("c")), "(1 2 . c)"),
        (make_list([String("a"), NULL]), '("a" ())'),
    ],
)
def test_render(value, expected):
    assert str(value) == expected
    out = io.StringIO()
    value.render(out)
    assert out.getvalue() == expected


def test_rational_with_zero_denominator():
    with pytest.raises(SkimDivisionByZero):
        Rational(1, 0)


def test_rational_zero_is_normalized():
    r = Rational(0, -5)
    assert (r.numerator, r.denominator) == (0, 1)


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(display "hi")', "hi"),
        ('(display "a\\nb")', "a\nb"),
        ("(display 1/2)", "1/2"),
        ("(display '(1 \"a\"))", '(1 "a")'),
        ("(display #f)", "#f"),
        ("(display car)", "#<procedure>"),
    ],
)
def test_display(interp, capsys, source, expected):
    assert interp.eval(source) is VOID
    assert capsys.readouterr().out == expected
