"""Core evaluator for the Skim interpreter.

Evaluation walks an Expression tree produced by the analyzer. Variables,
primitive calls and applications are handled here; every other node goes to
its handler in the special-form registry.
"""

from __future__ import annotations

from skim.errors import SkimUnboundSymbol
from skim.evaluation.apply import apply_form, primitive_procedure
from skim.evaluation.special_forms import FORM_HANDLERS
from skim.expressions import (
    Apply,
    BinaryCall,
    Expression,
    Literal,
    SpreadCall,
    UnaryCall,
    Var,
    VariadicCall,
)
from skim.types.environment import Environment
from skim.types.values import Value, iter_list


def resolve_variable(name: str, env: Environment) -> Value:
    """Lexical lookup, falling back to the procedure for a primitive name."""
    value = env.get(name)
    if value is not None:
        return value
    proc = primitive_procedure(name)
    if proc is not None:
        return proc
    raise SkimUnboundSymbol(f"Cannot lookup unbound symbol {name}")


def evaluate(expr: Expression, env: Environment) -> Value:
    match expr:
        case Literal(value):
            return value
        case Var(name):
            return resolve_variable(name, env)
        case UnaryCall(primitive, operand):
            return primitive([evaluate(operand, env)])
        case BinaryCall(primitive, left, right):
            a = evaluate(left, env)
            return primitive([a, evaluate(right, env)])
        case VariadicCall(primitive, operands):
            return primitive([evaluate(e, env) for e in operands])
        case SpreadCall(primitive, parameter):
            return primitive(list(iter_list(env.lookup(parameter))))
        case Apply():
            return apply_form(expr, env, evaluate)
    return FORM_HANDLERS[type(expr)](expr, env, evaluate)
