"""User-defined procedures and their argument binding."""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from dotlisp.types.environment import Environment
from dotlisp.types.expression import Expression


class Closure(Expression):
    """A first-class procedure with parameter names, body, and captured env.

    The captured environment is held by reference: later definitions in the
    defining scope are visible when the body looks them up.
    """

    __slots__ = ("parameters", "body", "env")

    def __init__(self, parameters: Iterable[str], body: Expression, env: Environment):
        self.parameters: tuple[str, ...] = tuple(parameters)
        self.body: Expression = body
        self.env: Environment = env

    def extend_env(self, args: Iterable[Expression]) -> Environment:
        """Bind argument values positionally in a new child of the captured env.

        Raises ArityError when the argument count differs from the parameter count.
        """
        return Environment(self.parameters, args, self.env)

    def to_lisp(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.parameters))
            buffer.write(") ")
            buffer.write(self.body.to_lisp())
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure({self.to_lisp()})"
