from skim import AnalyzerFn, EvaluatorFn
from skim.analysis.shapes import expect_length
from skim.errors import SkimAnalysisError
from skim.expressions import Quote
from skim.numeric import make_rational
from skim.syntax import (
    DOT,
    BooleanSyntax,
    ListSyntax,
    NumberSyntax,
    RationalSyntax,
    StringSyntax,
    Syntax,
    SymbolSyntax,
)
from skim.types.environment import Environment
from skim.types.values import Integer, String, Symbol, Value, boolean, make_list


def convert(stx: Syntax) -> Value:
    """Turn quoted syntax into data.

    A list becomes a proper list, or a dotted chain when a single '.' sits
    second to last (and is not the first element).
    """
    match stx:
        case NumberSyntax(n):
            return Integer(n)
        case RationalSyntax(n, d):
            return make_rational(n, d)
        case StringSyntax(s):
            return String(s)
        case BooleanSyntax(b):
            return boolean(b)
        case SymbolSyntax(name):
            return Symbol(name)
        case ListSyntax(items):
            return _convert_list(items)
    raise SkimAnalysisError(f"Cannot quote {stx!r}")


def _convert_list(items: tuple[Syntax, ...]) -> Value:
    dots = [i for i, s in enumerate(items) if s == DOT]
    if not dots:
        return make_list(convert(s) for s in items)
    if len(dots) > 1:
        raise SkimAnalysisError("illegal dot position: more than one dot")
    pos = dots[0]
    if pos == 0 or pos != len(items) - 2:
        raise SkimAnalysisError("illegal dot position")
    return make_list((convert(s) for s in items[:pos]), convert(items[-1]))


def analyze_quote(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Quote:
    expect_length(stx, 2, "quote")
    return Quote(stx.items[1])


def quote_form(node: Quote, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return convert(node.datum)
