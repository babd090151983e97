"""Function values: primitive builtins and user-defined closures."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from lispy.types.environment import Environment
from lispy.types.value import LiteralList, Value

BuiltinFn = Callable[[Environment, list[Value]], Value]


class Builtin(Value):
    """A primitive operation. Two builtins are equal only if they wrap the
    very same Python callable."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[Value]) -> Value:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return type(other) is Builtin and self.fn is other.fn

    def __hash__(self) -> int:
        return id(self.fn)

    def __repr__(self):
        return f"Builtin({self.name!r})"

    def __str__(self):
        return "builtin"


class Closure(Value):
    """A user function with formal parameters, body, and its own environment."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: LiteralList, body: LiteralList, env: Environment | None = None
    ):
        self.formals: LiteralList = formals
        self.body: LiteralList = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Closure:
        return Closure(self.formals.copy(), self.body.copy(), self.env.copy())

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is Closure
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure({self.formals!r}, {self.body!r})"
