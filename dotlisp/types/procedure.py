from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from dotlisp.types.expression import Expression


@dataclass(frozen=True, slots=True, eq=False)
class BuiltinProcedure(Expression):
    """A host-provided procedure taking the packaged argument List."""

    name: str
    action: Callable[[Expression], Expression]

    def __call__(self, args: Expression) -> Expression:
        return self.action(args)

    def to_lisp(self) -> str:
        return f"#<builtin {self.name}>"
