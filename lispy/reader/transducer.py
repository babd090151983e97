"""Turn syntax-tree nodes into runtime Values."""

from __future__ import annotations

from lispy.reader.syntax import BraceList, Expression, Node, ParenList, Root
from lispy.types.value import EvalList, LiteralList, Number, String, Symbol, Value


def read_value(node: Node) -> Value:
    """Transduce a syntax node into a Value.

    The root and parenthesised lists become EvalLists, braced lists become
    LiteralLists. An Expression is dispatched on its populated field, checked
    in the order number, symbol, string, paren, brace.
    """
    match node:
        case Root(expressions) | ParenList(expressions):
            return EvalList(read_value(e) for e in expressions)
        case BraceList(expressions):
            return LiteralList(read_value(e) for e in expressions)
        case Expression(number=int() | float() as n):
            return Number(n)
        case Expression(symbol=str() as s):
            return Symbol(s)
        case Expression(string=str() as s):
            return String(s)
        case Expression(paren=ParenList() as p):
            return read_value(p)
        case Expression(brace=BraceList() as b):
            return read_value(b)
    raise TypeError(f"Cannot read {node!r} as a value")
