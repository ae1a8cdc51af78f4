from skim import AnalyzerFn, EvaluatorFn
from skim.expressions import And, Or
from skim.syntax import ListSyntax
from skim.types.environment import Environment
from skim.types.values import FALSE, TRUE, Value, is_true


def analyze_and(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> And:
    return And(tuple(analyze_fn(s, env, scope) for s in stx.items[1:]))


def analyze_or(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Or:
    return Or(tuple(analyze_fn(s, env, scope) for s in stx.items[1:]))


def and_form(node: And, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If all operands are true, returns the value
    of the last operand. With zero operands, returns #t.
    """
    result: Value = TRUE
    for expr in node.operands:
        result = evaluate_fn(expr, env)
        if not is_true(result):
            return FALSE
    return result


def or_form(node: Or, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If there is none, returns #f. With zero operands,
    returns #f.
    """
    for expr in node.operands:
        val = evaluate_fn(expr, env)
        if is_true(val):
            return val
    return FALSE
