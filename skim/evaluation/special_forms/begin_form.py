from typing import Iterable

from skim import AnalyzerFn, EvaluatorFn
from skim.analysis.shapes import defined_name, expect_at_least
from skim.expressions import Begin, Expression
from skim.syntax import ListSyntax
from skim.types.environment import Environment
from skim.types.values import Value


def evaluate_sequence(
    body: Iterable[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    default: Value,
) -> Value:
    result = default
    for e in body:
        result = evaluate_fn(e, env)
    return result


def analyze_begin(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Begin:
    expect_at_least(stx, 2, "begin")
    body = []
    for s in stx.items[1:]:
        body.append(analyze_fn(s, env, scope))
        # later forms see names defined by earlier ones as variables
        name = defined_name(s)
        if name is not None:
            scope = scope | {name}
    return Begin(tuple(body))


def begin_form(node: Begin, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    for e in node.body[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(node.body[-1], env)
