"""Base classes of the DotLisp expression model.

Every value the language can hold is an instance of exactly one of the
concrete variants: Symbol, Number, Bool, Str (atoms), List,
BuiltinProcedure and Closure.
"""

from __future__ import annotations


class Expression:
    """Root of the closed set of expression variants."""

    __slots__ = ()

    def to_lisp(self) -> str:
        """Return the canonical textual form of this expression."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_lisp()


class Atom(Expression):
    """A non-compound expression."""

    __slots__ = ()
