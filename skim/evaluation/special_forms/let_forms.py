from skim import AnalyzerFn, EvaluatorFn
from skim.analysis.shapes import binding_name, distinct, expect_length
from skim.errors import SkimAnalysisError
from skim.expressions import Let, Letrec
from skim.syntax import ListSyntax, Syntax
from skim.types.environment import Environment
from skim.types.values import VOID, Value


def _bindings(stx: Syntax, form: str) -> list[tuple[str, Syntax]]:
    if not isinstance(stx, ListSyntax):
        raise SkimAnalysisError(f"{form}: bindings must be a list, got {stx}")
    pairs = []
    for binding in stx.items:
        if not isinstance(binding, ListSyntax) or len(binding.items) != 2:
            raise SkimAnalysisError(f"{form}: each binding must be (name expr), got {binding}")
        pairs.append((binding_name(binding.items[0], form), binding.items[1]))
    distinct([name for name, _ in pairs], form)
    return pairs


def analyze_let(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Let:
    expect_length(stx, 3, "let")
    pairs = _bindings(stx.items[1], "let")
    # initializers are outside the new scope
    bindings = tuple((name, analyze_fn(init, env, scope)) for name, init in pairs)
    inner = scope | {name for name, _ in pairs}
    return Let(bindings, analyze_fn(stx.items[2], env, inner))


def analyze_letrec(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Letrec:
    expect_length(stx, 3, "letrec")
    pairs = _bindings(stx.items[1], "letrec")
    inner = scope | {name for name, _ in pairs}
    bindings = tuple((name, analyze_fn(init, env, inner)) for name, init in pairs)
    return Letrec(bindings, analyze_fn(stx.items[2], env, inner))


def let_form(node: Let, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    values = [evaluate_fn(init, env) for _, init in node.bindings]
    frame = env.extend((name for name, _ in node.bindings), values)
    return evaluate_fn(node.body, frame)


def letrec_form(node: Letrec, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    All names are bound (to void) in one new frame before any initializer
    runs, so initializers may refer to each other; each is assigned in order.
    """
    frame = env.extend((name for name, _ in node.bindings), [VOID] * len(node.bindings))
    for name, init in node.bindings:
        frame.define(name, evaluate_fn(init, frame))
    return evaluate_fn(node.body, frame)
