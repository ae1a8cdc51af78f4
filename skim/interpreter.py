from __future__ import annotations

import logging

from skim.analysis.analyzer import analyze
from skim.evaluation.evaluator import evaluate
from skim.expressions import Expression
from skim.reader.parser import TokenStream, lex
from skim.syntax import Syntax
from skim.types.environment import Environment
from skim.types.values import VOID, Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads, analyzes and evaluates Skim code against one global environment
    that persists across calls.

    Each top-level form is analyzed only after the previous one has been
    evaluated, so a `define` changes how later forms are analyzed.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()

    def analyze(self, stx: Syntax) -> Expression:
        expr = analyze(stx, self.env)
        logger.debug("analyzed %s -> %r", stx, expr)
        return expr

    def evaluate(self, expr: Expression) -> Value:
        value = evaluate(expr, self.env)
        logger.debug("evaluated to %s", value)
        return value

    def eval_all(self, code: str) -> list[Value]:
        """Evaluate every form in `code`, returning all of their values."""
        stream = TokenStream(lex(code))
        return [self.evaluate(self.analyze(stx)) for stx in stream.parse_all()]

    def eval(self, code: str) -> Value:
        """Evaluate every form in `code` and return the last value (void if none)."""
        results = self.eval_all(code)
        if not results:
            return VOID
        return results[-1]
