"""Core evaluator for the DotLisp interpreter.

Implements special-form dispatch and eval/apply for call forms. There is no
tail-call elimination: every nested evaluation consumes Python stack, so the
evaluator counts its own nesting depth and fails with RecursionDepthError
past a configurable limit.
"""

from __future__ import annotations

from loguru import logger

from dotlisp import SExpression, LispValue
from dotlisp.config import get_max_depth
from dotlisp.errors import EvaluatorError, RecursionDepthError
from dotlisp.evaluation.apply import apply
from dotlisp.evaluation.special_forms import SPECIAL_FORMS
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List
from dotlisp.types.symbol import Symbol


class Evaluator:
    """Tree-walking evaluator; one instance can be reused across top-level forms."""

    def __init__(self, max_depth: int | None = None):
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        self.depth: int = 0

    def eval(self, expr: SExpression, env: Environment) -> LispValue:
        if self.depth >= self.max_depth:
            logger.warning("evaluator.depth_exceeded max_depth={}", self.max_depth)
            raise RecursionDepthError(
                f"Maximum evaluation depth {self.max_depth} exceeded"
            )
        self.depth += 1
        try:
            return self._eval(expr, env)
        except RecursionError as e:
            raise RecursionDepthError("Python recursion limit reached during evaluation") from e
        finally:
            self.depth -= 1

    def _eval(self, expr: SExpression, env: Environment) -> LispValue:
        match expr:
            case Symbol(name=name):
                return env.lookup(name)

            case List(items=()):
                raise EvaluatorError("Cannot evaluate an empty list")

            case List(items=(Symbol() as head, *_)) if head in SPECIAL_FORMS:
                # --- Special forms handling ---
                return SPECIAL_FORMS[head](expr.rest(), env, self.eval)

            case List():
                # Operator first, then every argument left to right.
                procedure = self.eval(expr.first(), env)
                args = List([self.eval(arg, env) for arg in expr.rest()])
                return apply(procedure, args, self.eval)

        # --- Atoms and procedures return as-is ---
        return expr


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` with a fresh default Evaluator."""
    return Evaluator().eval(expr, env)
