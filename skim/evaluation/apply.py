"""Application engine for Skim.

There is a single application path: the operator must evaluate to a
Procedure, whether written as a lambda or synthesized for a primitive name
used as a value. Arguments are evaluated left to right in the caller's
environment and bound in one new frame over the procedure's captured
environment.
"""

from __future__ import annotations

import functools
from typing import Optional

from skim import EvaluatorFn
from skim.analysis.analyzer import primitive_call
from skim.builtins import PRIMITIVES
from skim.errors import SkimArityError, SkimTypeError
from skim.expressions import Apply, SpreadCall, Var
from skim.types.environment import Environment
from skim.types.procedure import Procedure
from skim.types.values import Value, make_list

FIXED_PARAMETERS = {
    0: (),
    1: ("parm",),
    2: ("parm1", "parm2"),
}
REST_PARAMETER = "parms"


@functools.cache
def primitive_procedure(name: str) -> Optional[Procedure]:
    """Procedure standing for the primitive `name`, or None if there is none.

    Built once per primitive; its environment is an empty root frame, so the
    body can only see its own parameters.
    """
    primitive = PRIMITIVES.get(name)
    if primitive is None:
        return None
    root = Environment()
    if primitive.fixed:
        params = FIXED_PARAMETERS[primitive.min_args]
        body = primitive_call(primitive, [Var(p) for p in params])
        return Procedure(params, body, root)
    return Procedure((), SpreadCall(primitive, REST_PARAMETER), root, rest=REST_PARAMETER)


def apply_procedure(proc: Procedure, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    if not proc.accepts(len(args)):
        expected = str(proc.arity) if proc.rest is None else f"at least {proc.arity}"
        raise SkimArityError(f"Procedure expects {expected} argument(s), got {len(args)}")
    fixed = len(proc.parameters)
    frame = proc.env.extend(proc.parameters, args[:fixed])
    if proc.rest is not None:
        frame.define(proc.rest, make_list(args[fixed:]))
    return evaluate_fn(proc.body, frame)


def apply_form(node: Apply, env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    proc = evaluate_fn(node.operator, env)
    if not isinstance(proc, Procedure):
        raise SkimTypeError(f"Attempt to apply a non-procedure: {proc}")
    args = [evaluate_fn(e, env) for e in node.operands]
    return apply_procedure(proc, args, evaluate_fn)
