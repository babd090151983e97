"""Runtime values for Lispy.

Every datum the evaluator touches is one of a closed set of variants:
Number, Symbol, String, Error, EvalList, LiteralList and the function
variants defined in `lispy.types.function`. Equality follows the variant
first and the payload second, so an EvalList never equals a LiteralList
holding the same cells.

Atoms are immutable and may be shared freely; lists are mutable (the
evaluator replaces cells in place) and are deep-copied by `copy()`.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Iterable, Iterator


def format_number(value: float) -> str:
    """Render a float the way the printer shows numbers: `3`, `2.5`, `-1`."""
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


class Value:
    """Base class for all runtime values."""

    __slots__ = ()

    def copy(self) -> Value:
        return self


class Number(Value):
    __slots__ = ("value",)

    def __init__(self, value: float = 0.0):
        self.value: float = float(value)

    def __eq__(self, other: object) -> bool:
        return type(other) is Number and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        return format_number(self.value)


class Symbol(Value):
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is Symbol and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class String(Value):
    __slots__ = ("text",)

    def __init__(self, text: str = ""):
        self.text = text

    def __eq__(self, other: object) -> bool:
        return type(other) is String and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self):
        return f"String({self.text!r})"

    def __str__(self):
        return f'"{self.text}"'


class Error(Value):
    """An error datum. Errors flow through evaluation as ordinary values."""

    __slots__ = ("message",)

    def __init__(self, message: str = ""):
        self.message = message

    def __eq__(self, other: object) -> bool:
        return type(other) is Error and self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self):
        return f"Error({self.message!r})"

    def __str__(self):
        return self.message


class Cells(Value):
    """Common behaviour of the two list variants."""

    __slots__ = ("cells",)

    OPEN = "("
    CLOSE = ")"

    def __init__(self, cells: Iterable[Value] | None = None):
        self.cells: list[Value] = list(cells) if cells is not None else []

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i):
        return self.cells[i]

    def append(self, value: Value) -> Cells:
        self.cells.append(value)
        return self

    def pop(self, i: int = 0) -> Value:
        return self.cells.pop(i)

    def copy(self) -> Cells:
        return type(self)(cell.copy() for cell in self.cells)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self) or len(self.cells) != len(other.cells):
            return False
        # element-wise; list.__eq__ would short-circuit on identity (NaN)
        return all(a == b for a, b in zip(self.cells, other.cells))

    __hash__ = None  # mutable

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"

    def __str__(self):
        with StringIO() as buffer:
            buffer.write(self.OPEN)
            buffer.write(" ".join(str(cell) for cell in self.cells))
            buffer.write(self.CLOSE)
            return buffer.getvalue()


class EvalList(Cells):
    """A parenthesised form: evaluated by applying its head to its tail."""

    __slots__ = ()

    def as_literal(self) -> LiteralList:
        """Re-tag as a LiteralList sharing the same cells."""
        return LiteralList(self.cells)


class LiteralList(Cells):
    """A braced form: inert data, never applied automatically."""

    __slots__ = ()

    OPEN = "{"
    CLOSE = "}"

    def as_eval(self) -> EvalList:
        """Re-tag as an EvalList sharing the same cells."""
        return EvalList(self.cells)
