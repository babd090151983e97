"""Runtime environment for Lispy.

An Environment stores an ordered frame of symbol -> Value bindings and an
optional `parent` link, forming a lexical-scope chain ending at the root
environment owned by the Interpreter.

Bindings are copied on the way in and on the way out. The evaluator mutates
list cells in place while it works, so handing out the stored Value itself
would let evaluation corrupt the binding.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispy.types.value import Error, Symbol, Value

UNBOUND_SYMBOL = "Unbound Symbol"


def _name(symbol: Symbol | str) -> str:
    return symbol.name if isinstance(symbol, Symbol) else symbol


class Environment:
    """Ordered frame of bindings with a parent back-reference."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        # dicts keep insertion order; overwriting keeps a binding's position
        self.vars: dict[str, Value] = {}
        self.parent: Environment | None = parent

    @property
    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def lookup(self, symbol: Symbol | str) -> Value:
        """Return a copy of the value bound to `symbol`.

        Searches this frame, then each parent in turn. A miss at the root
        yields an `Error("Unbound Symbol")` value rather than raising.
        """
        name = _name(symbol)
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env.vars[name].copy()
            env = env.parent
        return Error(UNBOUND_SYMBOL)

    def put(self, symbol: Symbol | str, value: Value) -> None:
        """Bind `symbol` in this frame only, overwriting an existing binding."""
        self.vars[_name(symbol)] = value.copy()

    def define(self, symbol: Symbol | str, value: Value) -> None:
        """Bind `symbol` globally, in the root of the chain."""
        self.root.put(symbol, value)

    def copy(self) -> Environment:
        """Copy this frame; the parent is shared, not copied."""
        env = Environment(self.parent)
        env.vars = {name: value.copy() for name, value in self.vars.items()}
        return env

    def __contains__(self, symbol: Symbol | str) -> bool:
        return _name(symbol) in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            frames = []
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    frames.append(frame.getvalue())
                env = env.parent
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
