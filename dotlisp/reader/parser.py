"""
  Lisp Reader, Tokenizer and Parser

- `tokenize` / `read_from_tokens`: whole-string path over a naive token list
- `InPort`: streaming, line-at-a-time token source for files and REPLs
- Emits DotLisp expression variants:

    - lists -> List
    - symbols -> Symbol
    - "text" -> Str (quotes stripped, no escape processing)
    - true / false -> Bool
    - integers -> Number(int), decimals -> Number(float)
    - quote forms -> (quote expr), (quasiquote expr), (unquote expr),
      (unquotesplicing expr)
"""

from __future__ import annotations

import io
import re
from typing import Callable, Iterator, Optional, TextIO

from dotlisp import SExpression
from dotlisp.errors import ParserError
from dotlisp.types.atoms import Number, Str, TRUE, FALSE
from dotlisp.types.lisp_list import List
from dotlisp.types.symbol import Symbol
from dotlisp.reader.reader_macros import reader_macros


TOKEN_RE = re.compile(
    r"\s*("
    r",@|[('`,)]"  # quote family and parens
    r'|"(?:\\.|[^\\"])*"'  # double-quoted strings
    r"|;.*"  # single-line comment
    r"|[^\s('\"`,;)]*"  # fallback: atoms
    r")(.*)"
)

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?")


def tokenize(source: str) -> list[str]:
    """Split `source` into tokens by padding parentheses and splitting on whitespace."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def parse_atom(token: str) -> SExpression:
    if token.startswith('"'):
        return Str(token[1:-1])
    if token == "true":
        return TRUE
    if token == "false":
        return FALSE
    if INT_RE.fullmatch(token):
        try:
            n = int(token)
            float(n)
        except (OverflowError, ValueError):
            # beyond float range: read as a float literal (inf)
            return Number(float(token))
        return Number(n)
    if FLOAT_RE.fullmatch(token):
        return Number(float(token))
    return Symbol(token)


def _read_form(token: str, next_token: Callable[[], Optional[str]]) -> SExpression:
    """Read one expression starting at `token`, pulling more tokens as needed."""
    if token == "(":
        items: list[SExpression] = []
        while True:
            token = next_token()
            if token is None:
                raise ParserError("Unexpected EOF while reading list")
            if token == ")":
                return List(items)
            items.append(_read_form(token, next_token))

    if token == ")":
        raise ParserError("Unexpected ')'")

    if reader_macros.is_macro(token):
        following = next_token()
        if following is None:
            raise ParserError(f"Unexpected EOF after {token}")
        return reader_macros.expand(token, _read_form(following, next_token))

    return parse_atom(token)


def read_from_tokens(tokens: list[str]) -> SExpression:
    """Parse one expression from the front of `tokens`, consuming what it reads."""
    def next_token() -> Optional[str]:
        return tokens.pop(0) if tokens else None

    token = next_token()
    if token is None:
        raise ParserError("Unexpected EOF")
    return _read_form(token, next_token)


class InPort:
    """Pull-based token source over a text stream, read one line at a time."""

    def __init__(self, source: TextIO | str):
        self.stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self.line: str = ""

    def next_token(self) -> Optional[str]:
        """Return the next token, or None once the stream is exhausted."""
        while True:
            if not self.line:
                self.line = self.stream.readline()
                if not self.line:
                    return None
            match = TOKEN_RE.match(self.line)
            token, self.line = match.group(1), match.group(2)
            if token and not token.startswith(";"):
                return token
            if not token and self.line:
                # Only an unmatched '"' stops the atom pattern without consuming.
                self.line = ""
                raise ParserError("Unterminated string literal")

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self.line = ""

    def read(self) -> Optional[SExpression]:
        """Read the next complete expression, or None at end of input."""
        token = self.next_token()
        if token is None:
            return None
        return _read_form(token, self.next_token)

    def read_all(self) -> Iterator[SExpression]:
        while (expr := self.read()) is not None:
            yield expr


def parse(program: str) -> SExpression:
    """Parse the first expression in `program`."""
    expr = InPort(program).read()
    if expr is None:
        raise ParserError("Unexpected EOF")
    return expr


def parse_all(program: str) -> list[SExpression]:
    return list(InPort(program).read_all())
