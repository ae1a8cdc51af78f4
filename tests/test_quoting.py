import pytest

from skim.errors import SkimAnalysisError, SkimTypeError
from skim.evaluation.special_forms.quote_forms import convert
from skim.reader.parser import read_all
from skim.types.values import NULL, Integer, Pair, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("'a", "a"),
        ("'42", "42"),
        ("'2/4", "1/2"),
        ("'#t", "#t"),
        ("'\"s\"", '"s"'),
        ("'()", "()"),
        ("()", "()"),
        ("'(1 2 3)", "(1 2 3)"),
        ("'(1 (2 3) 4)", "(1 (2 3) 4)"),
        ("'(1 . 2)", "(1 . 2)"),
        ("'(1 2 . 3)", "(1 2 . 3)"),
        ("'(1 . (2 3))", "(1 2 3)"),
        ("'(1 . ())", "(1)"),
        ("''x", "(quote x)"),
        ("(quote (quote x))", "(quote x)"),
        ("'(if 1 2)", "(if 1 2)"),
        ("(car '(a . b))", "a"),
        ("(cdr '(a . b))", "b"),
    ],
)
def test_quote(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["'(1 . 2 3)", "'(. 1)", "'(1 . . 2)", "'(1 .)", "'(.)"])
def test_illegal_dot_position(run, source):
    with pytest.raises(SkimAnalysisError):
        run(source)


def test_dot_outside_quote_is_invalid(run):
    with pytest.raises(SkimAnalysisError):
        run("(define (f . args) 1)")


def test_convert_builds_dotted_chain():
    [stx] = read_all("(a b . c)")
    value = convert(stx)
    assert isinstance(value, Pair)
    assert value.car == Symbol("a")
    assert value.cdr.car == Symbol("b")
    assert value.cdr.cdr == Symbol("c")


def test_convert_proper_list_ends_in_null():
    [stx] = read_all("(1)")
    assert convert(stx).cdr is NULL
    assert convert(stx).car == Integer(1)


def test_each_evaluation_of_quote_makes_fresh_pairs(run):
    run("(define (f) '(1 2))")
    assert run("(eq? (f) (f))") == "#f"
    run("(define p (f)) (set-car! p 9)")
    assert run("(f)") == "(1 2)"


def test_quoted_list_is_proper(run):
    assert run("(list? '(1 2))") == "#t"
    assert run("(list? '(1 . 2))") == "#f"


def test_car_of_quoted_empty_list(run):
    with pytest.raises(SkimTypeError):
        run("(car '())")
