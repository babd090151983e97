"""Syntax tree produced by the parser.

A closed set of node types. `Expression` carries exactly one populated
field; the transducer in `lispy.reader.transducer` dispatches on them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class ParenList:
    expressions: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class BraceList:
    expressions: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class Expression:
    number: Optional[float] = None
    symbol: Optional[str] = None
    string: Optional[str] = None
    paren: Optional[ParenList] = None
    brace: Optional[BraceList] = None


@dataclass(frozen=True)
class Root:
    expressions: tuple[Expression, ...] = field(default_factory=tuple)


Node = Union[Root, Expression, ParenList, BraceList]
