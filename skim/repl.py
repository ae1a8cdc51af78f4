"""Read-eval-print loop and command line entry point."""

from __future__ import annotations

import logging
import sys
from contextlib import redirect_stdout
from typing import Optional, TextIO

from skim.config import get_log_level, get_prompt
from skim.errors import SkimError, SkimSyntaxError
from skim.expressions import Apply, Begin, Cond, Expression, If, Literal, Var
from skim.interpreter import Interpreter
from skim.reader.parser import Reader
from skim.types.values import Terminate, Void

logger = logging.getLogger(__name__)


def is_explicit_void(expr: Optional[Expression]) -> bool:
    """True when `expr` ends in a (void) call, so its void result is printed."""
    match expr:
        case Literal(Void()):
            return True
        case Apply(Var("void"), _):
            return True
        case Begin(body):
            return bool(body) and is_explicit_void(body[-1])
        case If(_, consequent, alternative):
            return is_explicit_void(consequent) or is_explicit_void(alternative)
        case Cond(clauses):
            return any(c.body and is_explicit_void(c.body[-1]) for c in clauses)
    return False


def repl(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    prompt: Optional[str] = None,
    interpreter: Optional[Interpreter] = None,
) -> None:
    """Evaluate data from `stdin` one at a time, printing results to `stdout`.

    The prompt is only written when `stdin` is a terminal, and `display`
    output goes to `stdout` too. An error in one datum prints `RuntimeError`
    and the loop carries on with the next one; the loop ends at end of input
    or when (exit) is evaluated.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    interp = interpreter if interpreter is not None else Interpreter()
    reader = Reader(stdin)
    if prompt is None:
        prompt = get_prompt() if stdin.isatty() else ""

    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()
        try:
            stx = reader.read()
            if stx is None:
                break
            expr = interp.analyze(stx)
            # display writes to sys.stdout
            with redirect_stdout(stdout):
                value = interp.evaluate(expr)
        except SkimError as e:
            logger.debug("error: %s", e)
            if isinstance(e, SkimSyntaxError):
                reader.recover()
            stdout.write("RuntimeError\n")
            stdout.flush()
            continue

        if isinstance(value, Terminate):
            break
        if isinstance(value, Void) and not is_explicit_void(expr):
            continue
        stdout.write(f"{value}\n")
        stdout.flush()


def log_level() -> int:
    level = logging.getLevelName(get_log_level())
    return level if isinstance(level, int) else logging.WARNING


def main() -> int:
    logging.basicConfig(
        level=log_level(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    repl()
    return 0
