from skim import AnalyzerFn, EvaluatorFn
from skim.errors import SkimAnalysisError
from skim.expressions import If
from skim.syntax import ListSyntax
from skim.types.environment import Environment
from skim.types.values import VOID, Value, is_true


def analyze_if(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> If:
    if len(stx.items) not in (3, 4):
        raise SkimAnalysisError("if requires a condition, a consequent and an optional alternative")
    test, consequent, *alternative = (analyze_fn(s, env, scope) for s in stx.items[1:])
    return If(test, consequent, alternative[0] if alternative else None)


def if_form(node: If, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    # Only #f is false
    if is_true(evaluate_fn(node.test, env)):
        return evaluate_fn(node.consequent, env)
    if node.alternative is not None:
        return evaluate_fn(node.alternative, env)
    return VOID
