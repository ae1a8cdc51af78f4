"""Shape checks shared by the special-form analyzers."""

from __future__ import annotations

from skim.analysis.names import validate_variable_name
from skim.errors import SkimAnalysisError
from skim.syntax import ListSyntax, Syntax, SymbolSyntax


def expect_length(stx: ListSyntax, count: int, usage: str) -> None:
    if len(stx.items) != count:
        raise SkimAnalysisError(
            f"{usage}: expected {count - 1} operand(s), got {len(stx.items) - 1}"
        )


def expect_at_least(stx: ListSyntax, count: int, usage: str) -> None:
    if len(stx.items) < count:
        raise SkimAnalysisError(
            f"{usage}: expected at least {count - 1} operand(s), got {len(stx.items) - 1}"
        )


def binding_name(stx: Syntax, form: str) -> str:
    if not isinstance(stx, SymbolSyntax):
        raise SkimAnalysisError(f"{form}: expected a symbol, got {stx}")
    return validate_variable_name(stx.name)


def distinct(names: list[str], form: str) -> tuple[str, ...]:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise SkimAnalysisError(f"{form}: duplicate name {name}")
        seen.add(name)
    return tuple(names)


def parameter_list(stx: Syntax, form: str) -> tuple[str, ...]:
    if not isinstance(stx, ListSyntax):
        raise SkimAnalysisError(f"{form}: parameter list must be a list, got {stx}")
    return distinct([binding_name(p, form) for p in stx.items], form)


def defined_name(stx: Syntax) -> str | None:
    """Name bound by a (define ...) form, or None for anything else."""
    if not isinstance(stx, ListSyntax) or len(stx.items) < 2:
        return None
    head, target = stx.items[0], stx.items[1]
    if not (isinstance(head, SymbolSyntax) and head.name == "define"):
        return None
    if isinstance(target, ListSyntax) and target.items:
        target = target.items[0]
    if isinstance(target, SymbolSyntax):
        return target.name
    return None
