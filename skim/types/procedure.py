"""Procedure representation for Skim."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from skim.expressions import Expression
    from skim.types.environment import Environment


@dataclass(eq=False, slots=True)
class Procedure:
    """A closure: formal parameters, a body expression and the captured env.

    The environment is held by reference, so later bindings made in the
    defining scope are visible when the body runs. `rest` names a parameter
    collecting surplus arguments into a list; only synthesized primitive
    procedures use it, user lambdas have fixed arity.
    """

    parameters: tuple[str, ...]
    body: Expression
    env: Environment
    rest: str | None = None

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def accepts(self, count: int) -> bool:
        if self.rest is None:
            return count == len(self.parameters)
        return count >= len(self.parameters)

    def render(self, out: TextIO) -> None:
        out.write("#<procedure>")

    def __str__(self) -> str:
        return "#<procedure>"

    def __repr__(self) -> str:
        params = " ".join(self.parameters)
        if self.rest is not None:
            params = f"{params} . {self.rest}" if params else self.rest
        return f"<Procedure ({params})>"
