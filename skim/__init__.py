# Core type aliases for Skim.
#
# Source text is read into Syntax nodes (skim.syntax), analyzed once into an
# immutable Expression tree (skim.expressions), and that tree is evaluated
# against an Environment to produce tagged runtime values (skim.types.values).
#
# - AnalyzerFn:  analyze(syntax, env, scope) -> Expression, handed to the
#                per-form analyzers so they can recurse without importing the
#                analyzer module.
# - EvaluatorFn: evaluate(expression, env) -> Value, handed to special forms
#                for the same reason.

from typing import Any, Callable

AnalyzerFn = Callable[..., Any]
EvaluatorFn = Callable[..., Any]

__version__ = "0.1.0"
