"""Runtime environment for Skim.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Each procedure application and each `let`
creates one child frame; closures keep the frame they were created in alive
for as long as they are reachable.

Environments (and the procedures closing over them) are not safe for
concurrent mutation from multiple threads without external synchronization.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable, Optional

from skim.errors import SkimUnboundSymbol

if TYPE_CHECKING:
    from skim.types.values import Value


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value` in this frame, replacing a binding already here."""
        self.vars[name] = value

    def assign(self, name: str, value: Value) -> None:
        """Rebind the nearest existing binding of `name`.

        When `name` is bound nowhere in the chain it is bound in this frame.
        """
        env = self.find(name)
        if env is None:
            env = self
        env.vars[name] = value

    def extend(self, names: Iterable[str], values: Iterable[Value]) -> Environment:
        """Return a new child frame binding `names` to `values`; self is untouched."""
        child = Environment(outer=self)
        for name, value in zip(names, values):
            child.vars[name] = value
        return child

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str) -> Optional[Value]:
        """Look up `name` along the chain, returning None when it is absent."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name`.

        Raises SkimUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise SkimUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def set(self, name: str, value: Value) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SkimUnboundSymbol if the name is not found.
        """
        env = self.find(name)
        if env is None:
            raise SkimUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
