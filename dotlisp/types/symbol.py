from __future__ import annotations

import sys
from dataclasses import dataclass

from dotlisp.types.expression import Atom


@dataclass(frozen=True, slots=True)
class Symbol(Atom):
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(self.name))

    def to_lisp(self) -> str:
        return self.name
