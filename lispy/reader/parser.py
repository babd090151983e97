"""
  Lispy Reader: lexer and parser

- Streaming lexer yielding (token_type, token_value) tuples
- Recursive-descent parser building the syntax tree in `lispy.reader.syntax`:

    - numbers   -> Expression(number=float)
    - symbols   -> Expression(symbol=str)
    - strings   -> Expression(string=str), quotes stripped
    - ( ... )   -> Expression(paren=ParenList)
    - { ... }   -> Expression(brace=BraceList)
    - top level -> Root
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from lispy.errors import LispySyntaxError
from lispy.reader.syntax import BraceList, Expression, ParenList, Root

SYMBOL_CHARS = r"A-Za-z0-9_+\-*/\\=<>!&"

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"[^"]*")'  # double-quoted strings, no escapes
    rf"|(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?(?![{SYMBOL_CHARS}]))"
    rf"|(?P<symbol>[{SYMBOL_CHARS}]+)"  # fallback: symbols
)

WHITESPACE_RE = re.compile(r"\s*")

CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
DISPLAY = {"rparen": "')'", "rbrace": "'}'"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            break
        m = TOKEN_RE.match(source, pos)
        if m is None:
            if source[pos] == '"':
                raise LispySyntaxError(f"Unterminated string starting at {pos}")
            raise LispySyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Expression]:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "number":
            self.advance()
            return Expression(number=float(tok_val))

        if tok_type == "symbol":
            self.advance()
            return Expression(symbol=tok_val)

        if tok_type == "string":
            self.advance()
            return Expression(string=tok_val[1:-1])

        if tok_type in CLOSERS:
            self.advance()
            items = self._parse_until(CLOSERS[tok_type])
            if tok_type == "lparen":
                return Expression(paren=ParenList(items))
            return Expression(brace=BraceList(items))

        raise LispySyntaxError(f"Unexpected {tok_val!r}")

    def _parse_until(self, closer: str) -> tuple[Expression, ...]:
        items = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type == closer:
                self.advance()
                return tuple(items)
            if tok_type is None:
                raise LispySyntaxError(f"Expected {DISPLAY[closer]} before end of input")
            if tok_type in DISPLAY:
                raise LispySyntaxError(f"Expected {DISPLAY[closer]} but found {tok_val!r}")
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> Root:
    """Read a whole source text into a syntax tree."""
    return Root(tuple(TokenStream(lex(source)).parse_all()))
