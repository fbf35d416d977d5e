"""Runtime environment for DotLisp.

The Environment stores bindings of symbol names to expressions and supports
nested lexical scopes via an `outer` link. A child scope never owns its
parent; closures keep a reference to the scope they were created in, so a
scope may outlive the call that created it.
"""

from __future__ import annotations

from typing import Iterable, Optional

from dotlisp.errors import ArityError, UnboundSymbolError
from dotlisp.types.expression import Expression
from dotlisp.types.symbol import Symbol


def _name_of(name: str | Symbol) -> str:
    return name.name if isinstance(name, Symbol) else name


class Environment:
    """Hierarchical mapping from symbol names to expressions."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        params: Iterable[str] = (),
        args: Iterable[Expression] = (),
        outer: Optional[Environment] = None,
    ):
        params = list(params)
        args = list(args)
        if len(params) != len(args):
            raise ArityError(
                f"Expected {len(params)} argument(s), got {len(args)}"
            )
        self.vars: dict[str, Expression] = dict(zip(params, args))
        self.outer: Environment | None = outer

    def define(self, name: str | Symbol, value: Expression) -> None:
        """Bind `name` to `value` in this scope only."""
        self.vars[_name_of(name)] = value

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        key = _name_of(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str | Symbol) -> Expression:
        """Look up the value bound to `name`, innermost scope first.

        Raises UnboundSymbolError if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"Cannot lookup unbound symbol {_name_of(name)}")
        return env.vars[_name_of(name)]

    def update(self, mapping: dict[str, Expression]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str | Symbol) -> bool:
        return self.find(name) is not None

    def scopes(self) -> Iterable[Environment]:
        """This scope followed by each enclosing one, innermost first."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def _frame_text(self) -> str:
        pairs = ", ".join(f"{name}: {value.to_lisp()}" for name, value in self.vars.items())
        return "{" + pairs + "}"

    def __str__(self) -> str:
        text = self._frame_text()
        return text if self.outer is None else text + " -> ..."

    def __repr__(self) -> str:
        chain = " -> ".join(scope._frame_text() for scope in self.scopes())
        return f"<Environment chain: {chain}>"
