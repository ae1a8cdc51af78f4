"""
  Scheme Reader, Lexer and Parser

- Streaming, lazy parsing: input is pulled line by line, only as far as the
  datum being read requires, so an interactive session never waits for input
  beyond the current form.
- Emits Syntax nodes (skim.syntax):

    - [+-]digits        -> NumberSyntax
    - [+-]digits/digits -> RationalSyntax
    - #t #f             -> BooleanSyntax
    - "..."             -> StringSyntax
    - ( ... ) [ ... ]   -> ListSyntax ('.' is kept as a SymbolSyntax)
    - 'x                -> (quote x)
    - anything else     -> SymbolSyntax (including 1e-3, .5, +12.)
"""

from __future__ import annotations

import re
import weakref
from collections import deque
from typing import Iterator, Optional, TextIO

from skim.errors import SkimSyntaxError
from skim.syntax import (
    BooleanSyntax,
    ListSyntax,
    NumberSyntax,
    RationalSyntax,
    StringSyntax,
    Syntax,
    SymbolSyntax,
)


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>[(\[])"  # ( [
    r"|(?P<rparen>[)\]])"  # ) ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\[\]\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?\d+\Z")
RATIONAL_RE = re.compile(r"([+-]?\d+)/(\d+)\Z")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#true": True,
    "#f": False,
    "#false": False,
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
}


class UnterminatedString(SkimSyntaxError):
    """ Raised when the input ends inside a string literal"""


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:].lstrip()
            if not rest:
                break
            if rest.startswith('"'):
                raise UnterminatedString("Unterminated string literal")
            raise SkimSyntaxError(f"Unexpected char at {pos}: {rest[0]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def parse_atom(text: str) -> Syntax:
    if INTEGER_RE.match(text):
        return NumberSyntax(int(text))
    m = RATIONAL_RE.match(text)
    if m:
        return RationalSyntax(int(m.group(1)), int(m.group(2)))
    if text.lower() in BOOLEANS:
        return BooleanSyntax(BOOLEANS[text.lower()])
    return SymbolSyntax(text)


def unescape(body: str) -> str:
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
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

    def parse_expr(self) -> Optional[Syntax]:
        """Parse one datum, or return None when the input is exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None
        self.advance()

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return StringSyntax(unescape(tok_val[1:-1]))

        if tok_type == "quote":
            expr = self.parse_expr()
            if expr is None:
                raise SkimSyntaxError("Expected a datum after quote")
            return ListSyntax((SymbolSyntax("quote"), expr))

        if tok_type == "lparen":
            items: list[Syntax] = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SkimSyntaxError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return ListSyntax(tuple(items))
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SkimSyntaxError("Unexpected ')'")

        raise SkimSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Syntax]:
        while (expr := self.parse_expr()) is not None:
            yield expr


class Reader:
    """Reads one datum at a time from a text stream.

    Lines are lexed as they are pulled; a line that ends inside a string
    literal is joined with the following ones until the literal closes.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pending = ""
        self._tokens: deque[tuple[str, str]] = deque()
        self.token_stream = TokenStream(self._next_token())

    def _fill(self) -> bool:
        line = self.stream.readline()
        if not line:
            if self._pending:
                self._pending = ""
                raise SkimSyntaxError("Unterminated string literal")
            return False
        self._pending += line
        try:
            tokens = list(lex(self._pending))
        except UnterminatedString:
            return True
        except SkimSyntaxError:
            self._pending = ""
            raise
        self._pending = ""
        self._tokens.extend(tokens)
        return True

    def _next_token(self) -> Iterator[tuple[str, str]]:
        while True:
            while not self._tokens:
                if not self._fill():
                    return
            yield self._tokens.popleft()

    def read(self) -> Optional[Syntax]:
        return self.token_stream.parse_expr()

    def recover(self) -> None:
        """Drop whatever is left of the current line after a syntax error."""
        self._tokens.clear()
        self._pending = ""
        # an error raised while filling closes the token generator
        self.token_stream = TokenStream(self._next_token())


_readers: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()


def reader_for(stream: TextIO) -> Reader:
    """Return the Reader attached to `stream`, creating it on first use."""
    rdr = _readers.get(stream)
    if rdr is None:
        rdr = Reader(stream)
        _readers[stream] = rdr
    return rdr


def read_one(stream: TextIO) -> Optional[Syntax]:
    """Read the next datum from `stream`; None at end of input."""
    return reader_for(stream).read()


def read_all(source: str) -> list[Syntax]:
    return list(TokenStream(lex(source)).parse_all())
