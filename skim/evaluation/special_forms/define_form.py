from skim import AnalyzerFn, EvaluatorFn
from skim.analysis.shapes import binding_name, expect_length, parameter_list
from skim.errors import SkimAnalysisError
from skim.expressions import Define, Lambda
from skim.syntax import ListSyntax, SymbolSyntax
from skim.types.environment import Environment
from skim.types.values import VOID, Value


def analyze_define(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Define:
    """
    (define name expr)
    (define (name p ...) body)  ; shorthand for (define name (lambda (p ...) body))
    """
    expect_length(stx, 3, "define")
    target, body = stx.items[1], stx.items[2]

    if isinstance(target, SymbolSyntax):
        name = binding_name(target, "define")
        return Define(name, analyze_fn(body, env, scope | {name}))

    if isinstance(target, ListSyntax):
        if not target.items:
            raise SkimAnalysisError("malformed define function syntax")
        name = binding_name(target.items[0], "define")
        params = parameter_list(ListSyntax(target.items[1:]), "define")
        inner = scope | {name} | set(params)
        return Define(name, Lambda(params, analyze_fn(body, env, inner)))

    raise SkimAnalysisError("malformed define expression")


def define_form(node: Define, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Rebinds the nearest existing binding, or binds in the current frame."""
    value = evaluate_fn(node.value, env)
    env.assign(node.name, value)
    return VOID
