"""Self-evaluating atoms: numbers, booleans and strings."""

from __future__ import annotations

from dataclasses import dataclass

from dotlisp.types.expression import Atom


@dataclass(frozen=True, slots=True, eq=False)
class Number(Atom):
    """An exact integer or a float; `raw` is the authoritative representation."""

    raw: int | float

    def __post_init__(self):
        if isinstance(self.raw, bool) or not isinstance(self.raw, (int, float)):
            raise TypeError(f"Number expects an int or float, got {self.raw!r}")

    def is_float(self) -> bool:
        return isinstance(self.raw, float)

    @property
    def value(self) -> float:
        """The numeric value widened to float."""
        return float(self.raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        try:
            return self.value == other.value
        except OverflowError:
            # an int beyond float range can only equal itself
            return self.raw == other.raw

    def __hash__(self) -> int:
        try:
            return hash(self.value)
        except OverflowError:
            return hash(self.raw)

    def to_lisp(self) -> str:
        return repr(self.raw)


@dataclass(frozen=True, slots=True)
class Bool(Atom):
    value: bool

    def to_lisp(self) -> str:
        return "true" if self.value else "false"


TRUE = Bool(True)
FALSE = Bool(False)


@dataclass(frozen=True, slots=True)
class Str(Atom):
    value: str

    def to_lisp(self) -> str:
        return f'"{self.value}"'
