from skim import AnalyzerFn, EvaluatorFn
from skim.analysis.shapes import binding_name, expect_length
from skim.expressions import Set
from skim.syntax import ListSyntax
from skim.types.environment import Environment
from skim.types.values import VOID, Value


def analyze_set(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Set:
    expect_length(stx, 3, "set!")
    name = binding_name(stx.items[1], "set!")
    return Set(name, analyze_fn(stx.items[2], env, scope))


def set_form(node: Set, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    value = evaluate_fn(node.value, env)
    env.set(node.name, value)
    return VOID
