from lispy.types.value import (
    Value,
    Number,
    Symbol,
    String,
    Error,
    Cells,
    EvalList,
    LiteralList,
    format_number,
)
from lispy.types.environment import Environment, UNBOUND_SYMBOL
from lispy.types.function import Builtin, BuiltinFn, Closure

__all__ = [
    "Value",
    "Number",
    "Symbol",
    "String",
    "Error",
    "Cells",
    "EvalList",
    "LiteralList",
    "format_number",
    "Environment",
    "UNBOUND_SYMBOL",
    "Builtin",
    "BuiltinFn",
    "Closure",
]
