from __future__ import annotations

from dotlisp.types.symbol import Symbol
from dotlisp.types.lisp_list import List
from dotlisp.types.expression import Expression


class ReaderMacros:
    """
    Registry of read-time expansions for the quote family.
    Maps a prefix token (like ' or `) to the keyword Symbol that wraps
    the next parsed expression: 'x reads as (quote x).
    """

    def __init__(self):
        self.macros: dict[str, Symbol] = {}

    def define(self, token: str, keyword: Symbol) -> None:
        """Register a reader macro for a given prefix token."""
        self.macros[token] = keyword

    def is_macro(self, token: str) -> bool:
        return token in self.macros

    def expand(self, token: str, expr: Expression) -> List:
        """Wrap `expr` in the keyword registered for `token`."""
        if token not in self.macros:
            raise ValueError(f"No reader macro defined for {token!r}")
        return List((self.macros[token], expr))


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
    ",@": Symbol("unquotesplicing"),
}

# Quote forms: ', `, , ,@
for key, name in QUOTE_FORMS.items():
    reader_macros.define(key, name)
