"""The List variant: program structure and the only compound data value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from dotlisp.errors import EmptyListError
from dotlisp.types.expression import Expression


@dataclass(frozen=True, slots=True, init=False)
class List(Expression):
    """An immutable ordered sequence of expressions.

    Operations that strip or prepend elements (`rest`, `cons`, `skip`)
    always build a new List; the backing tuple is never mutated.
    """

    items: tuple[Expression, ...] = ()

    def __init__(self, items: Iterable[Expression] = ()):
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Expression:
        return self.items[index]

    def is_empty(self) -> bool:
        return not self.items

    def first(self) -> Expression:
        if not self.items:
            raise EmptyListError("first: list is empty")
        return self.items[0]

    def rest(self) -> List:
        if not self.items:
            raise EmptyListError("rest: list is empty")
        return List(self.items[1:])

    def skip(self, n: int) -> List:
        return List(self.items[n:])

    def cons(self, head: Expression) -> List:
        return List((head, *self.items))

    def to_lisp(self) -> str:
        return "(" + " ".join(item.to_lisp() for item in self.items) + ")"
