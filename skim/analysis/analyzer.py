"""Syntax to Expression analysis.

Runs once per top-level form, before evaluation. The environment is only
consulted to tell whether a head symbol is currently bound as a variable; no
value is read from it and nothing is bound.
"""

from __future__ import annotations

from typing import Sequence

from skim.analysis.names import validate_variable_name
from skim.builtins import PRIMITIVES, Primitive
from skim.errors import SkimAnalysisError
from skim.evaluation.special_forms import RESERVED_WORDS
from skim.expressions import (
    Apply,
    BinaryCall,
    Expression,
    Literal,
    Quote,
    UnaryCall,
    Var,
    VariadicCall,
)
from skim.numeric import make_rational
from skim.syntax import (
    BooleanSyntax,
    ListSyntax,
    NumberSyntax,
    RationalSyntax,
    StringSyntax,
    Syntax,
    SymbolSyntax,
)
from skim.types.environment import Environment
from skim.types.values import Integer, String, boolean


def primitive_call(primitive: Primitive, operands: Sequence[Expression]) -> Expression:
    """Pick the call node for `primitive` by operand count.

    Every node calls the same primitive function, so the choice never changes
    the result, only the shape of the tree.
    """
    match len(operands):
        case 0 if primitive.unit is not None:
            return Literal(primitive.unit)
        case 1:
            return UnaryCall(primitive, operands[0])
        case 2:
            return BinaryCall(primitive, operands[0], operands[1])
    return VariadicCall(primitive, tuple(operands))


def is_variable(name: str, env: Environment, scope: frozenset[str]) -> bool:
    return name in scope or env.find(name) is not None


def analyze(stx: Syntax, env: Environment, scope: frozenset[str] = frozenset()) -> Expression:
    """Analyze one datum into an Expression.

    `scope` holds the names bound by the enclosing lambda, let, letrec and
    define forms; they shadow primitives and reserved words just like
    variables already bound in `env`.
    """
    match stx:
        case NumberSyntax(n):
            return Literal(Integer(n))
        case RationalSyntax(n, d):
            return Literal(make_rational(n, d))
        case StringSyntax(s):
            return Literal(String(s))
        case BooleanSyntax(b):
            return Literal(boolean(b))
        case SymbolSyntax(name):
            return Var(validate_variable_name(name))
        case ListSyntax(()):
            return Quote(ListSyntax())
        case ListSyntax((SymbolSyntax(name), *rest)) if not is_variable(name, env, scope):
            if name in PRIMITIVES:
                return analyze_primitive(PRIMITIVES[name], rest, env, scope)
            if name in RESERVED_WORDS:
                return RESERVED_WORDS[name](stx, env, scope, analyze)
            return analyze_application(stx, env, scope)
        case ListSyntax():
            return analyze_application(stx, env, scope)
    raise SkimAnalysisError(f"Cannot analyze {stx!r}")


def analyze_primitive(
    primitive: Primitive,
    operands: Sequence[Syntax],
    env: Environment,
    scope: frozenset[str],
) -> Expression:
    if not primitive.accepts(len(operands)):
        raise SkimAnalysisError(
            f"{primitive.name} requires {primitive.describe_arity()} argument(s), got {len(operands)}"
        )
    return primitive_call(primitive, [analyze(s, env, scope) for s in operands])


def analyze_application(stx: ListSyntax, env: Environment, scope: frozenset[str]) -> Apply:
    operator, *operands = (analyze(s, env, scope) for s in stx.items)
    return Apply(operator, tuple(operands))
