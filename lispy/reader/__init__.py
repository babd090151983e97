from lispy.reader.parser import lex, parse, TokenStream
from lispy.reader.syntax import Root, Expression, ParenList, BraceList
from lispy.reader.transducer import read_value
from lispy.types.value import EvalList


def read(source: str) -> EvalList:
    """Parse `source` and return its top-level forms wrapped in an EvalList."""
    return read_value(parse(source))


__all__ = [
    "lex",
    "parse",
    "read",
    "read_value",
    "TokenStream",
    "Root",
    "Expression",
    "ParenList",
    "BraceList",
]
