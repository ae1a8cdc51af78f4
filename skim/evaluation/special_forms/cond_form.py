from skim import AnalyzerFn, EvaluatorFn
from skim.analysis.shapes import expect_at_least
from skim.errors import SkimAnalysisError
from skim.evaluation.special_forms.begin_form import evaluate_sequence
from skim.expressions import Cond, CondClause
from skim.syntax import ListSyntax, SymbolSyntax
from skim.types.environment import Environment
from skim.types.values import VOID, Value, is_true


def analyze_cond(stx: ListSyntax, env: Environment, scope: frozenset[str], analyze_fn: AnalyzerFn) -> Cond:
    expect_at_least(stx, 2, "cond")
    clauses = []
    last = len(stx.items) - 1
    for i, clause in enumerate(stx.items[1:], start=1):
        if not isinstance(clause, ListSyntax) or not clause.items:
            raise SkimAnalysisError("cond clause must be a non-empty list")
        head, *rest = clause.items
        body = tuple(analyze_fn(s, env, scope) for s in rest)
        if isinstance(head, SymbolSyntax) and head.name == "else":
            if i != last:
                raise SkimAnalysisError("else clause must be the last clause of cond")
            clauses.append(CondClause(None, body))
        else:
            clauses.append(CondClause(analyze_fn(head, env, scope), body))
    return Cond(tuple(clauses))


def cond_form(node: Cond, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    Tests run in order, each at most once. A true test with no body yields the
    test's own value; with no matching clause the result is void.
    """
    for clause in node.clauses:
        if clause.is_else:
            return evaluate_sequence(clause.body, env, evaluate_fn, VOID)
        test = evaluate_fn(clause.test, env)
        if is_true(test):
            return evaluate_sequence(clause.body, env, evaluate_fn, test)
    return VOID
