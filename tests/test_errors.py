import pytest

from skim.errors import (
    SkimAnalysisError,
    SkimArityError,
    SkimDivisionByZero,
    SkimError,
    SkimInvalidSymbol,
    SkimOverflowError,
    SkimSyntaxError,
    SkimTypeError,
    SkimUnboundSymbol,
)
from skim.reader.parser import UnterminatedString


@pytest.mark.parametrize(
    "cls",
    [
        SkimSyntaxError,
        SkimAnalysisError,
        SkimInvalidSymbol,
        SkimUnboundSymbol,
        SkimArityError,
        SkimTypeError,
        SkimDivisionByZero,
        SkimOverflowError,
        UnterminatedString,
    ],
)
def test_every_error_is_a_skim_error(cls):
    assert issubclass(cls, SkimError)


@pytest.mark.parametrize(
    "source,error",
    [
        # reader
        ("(+ 1", SkimSyntaxError),
        # malformed forms and names
        ("(lambda (x))", SkimAnalysisError),
        ("(define 3x 1)", SkimInvalidSymbol),
        ("(+ 1 (car))", SkimAnalysisError),
        # evaluation
        ("nothing-here", SkimUnboundSymbol),
        ("((lambda (a b) a) 1)", SkimArityError),
        ("(5 5)", SkimTypeError),
        ("(car 5)", SkimTypeError),
        ("(/ 5 0)", SkimDivisionByZero),
        ("(expt 3 40)", SkimOverflowError),
    ],
)
def test_error_kinds(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_errors_carry_messages(interp):
    with pytest.raises(SkimUnboundSymbol, match="nothing-here"):
        interp.eval("nothing-here")
    with pytest.raises(SkimArityError, match="expects 1 argument"):
        interp.eval("(define c car) ((lambda (f) (f)) c)")


def test_errors_are_not_swallowed_inside_forms(interp):
    # an error deep inside and/or/cond/let escapes unchanged
    for source in ["(and 1 (car 1))", "(or #f (car 1))", "(cond ((car 1)))", "(let ((x (car 1))) x)"]:
        with pytest.raises(SkimTypeError):
            interp.eval(source)


def test_interpreter_state_survives_errors(interp):
    interp.eval("(define x 1)")
    with pytest.raises(SkimError):
        interp.eval("(set! x (car 1))")
    assert str(interp.eval("x")) == "1"

