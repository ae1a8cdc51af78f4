from skim import AnalyzerFn, EvaluatorFn
from skim.analysis.shapes import expect_length, parameter_list
from skim.expressions import Lambda
from skim.syntax import ListSyntax
from skim.types.environment import Environment
from skim.types.procedure import Procedure
from skim.types.values import Value


def analyze_lambda(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Lambda:
    # (lambda (p ...) body): fixed arity, exactly one body form
    expect_length(stx, 3, "lambda")
    params = parameter_list(stx.items[1], "lambda")
    return Lambda(params, analyze_fn(stx.items[2], env, scope | set(params)))


def lambda_form(node: Lambda, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return Procedure(node.parameters, node.body, env)
