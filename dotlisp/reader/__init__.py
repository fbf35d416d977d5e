from dotlisp.reader.parser import (
    InPort,
    parse,
    parse_all,
    parse_atom,
    read_from_tokens,
    tokenize,
)
from dotlisp.reader.printer import to_lisp_text

__all__ = [
    "InPort",
    "parse",
    "parse_all",
    "parse_atom",
    "read_from_tokens",
    "tokenize",
    "to_lisp_text",
]
