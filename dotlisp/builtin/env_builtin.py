"""Built-in procedures for the DotLisp runtime environment.

This module defines arithmetic, comparison, numeric equality and list
accessors exposed to Lisp code, plus the GlobalEnvironment that carries
them. Every builtin receives the evaluated arguments packaged as a single
List and fails with an EvaluatorError subclass naming the operation.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from dotlisp import LispValue
from dotlisp.errors import ArityError, DivisionByZeroError, WrongTypeError
from dotlisp.types.atoms import Bool, Number, TRUE
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List
from dotlisp.types.procedure import BuiltinProcedure
from dotlisp.types.symbol import Symbol


def _numbers(op: str, args: LispValue) -> list[Number]:
    """Check that `args` is a non-empty List of Numbers and return its items."""
    if not isinstance(args, List):
        raise WrongTypeError(f"{op} expects an argument list, got {args.to_lisp()}")
    if args.is_empty():
        raise ArityError(f"{op} requires at least 1 argument")
    for arg in args:
        if not isinstance(arg, Number):
            raise WrongTypeError(f"All arguments to {op} must be numbers, got {arg.to_lisp()}")
    return list(args)


def _floats(op: str, nums: list[Number]) -> list[float]:
    try:
        return [n.value for n in nums]
    except OverflowError:
        raise WrongTypeError(f"{op}: integer too large to convert to float") from None


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(op: str, args: LispValue, reducer: Callable, exact: bool = True) -> Number:
    """Fold left-to-right from the first argument.

    When `exact` is set and every operand is an integer the result stays an
    integer; otherwise the operands are widened to float.
    """
    if isinstance(args, Number):
        return args
    nums = _numbers(op, args)
    if len(nums) == 1:
        return nums[0]
    if exact and not any(n.is_float() for n in nums):
        return Number(reduce(reducer, (n.raw for n in nums)))
    return Number(reduce(reducer, _floats(op, nums)))


def add(args: LispValue) -> Number:
    """Sum of all arguments."""
    return _fold("+", args, operator.add)


def sub(args: LispValue) -> Number:
    """Subtract all subsequent numbers from the first."""
    return _fold("-", args, operator.sub)


def mul(args: LispValue) -> Number:
    """Product of all arguments."""
    return _fold("*", args, operator.mul)


def div(args: LispValue) -> Number:
    """Divide left-to-right using float division."""
    try:
        return _fold("/", args, operator.truediv, exact=False)
    except ZeroDivisionError:
        raise DivisionByZeroError("/: division by zero") from None


# -------------------------------
# Comparison
# -------------------------------
def _chain(op: str, args: LispValue, predicate: Callable[[float, float], bool]) -> Bool:
    """True if `predicate` holds for every consecutive pair, stopping at the first failure."""
    values = _floats(op, _numbers(op, args))
    return Bool(all(predicate(a, b) for a, b in zip(values, values[1:])))


def gt(args: LispValue) -> Bool:
    return _chain(">", args, operator.gt)


def gte(args: LispValue) -> Bool:
    return _chain(">=", args, operator.ge)


def lt(args: LispValue) -> Bool:
    return _chain("<", args, operator.lt)


def lte(args: LispValue) -> Bool:
    return _chain("<=", args, operator.le)


def equals(args: LispValue) -> Bool:
    """Numeric chained equality; a lone Symbol argument is trivially equal to itself."""
    if isinstance(args, Symbol):
        return TRUE
    if isinstance(args, List) and len(args) == 1 and isinstance(args[0], Symbol):
        return TRUE
    return _chain("==", args, operator.eq)


# -------------------------------
# Lists
# -------------------------------
def _single_list(op: str, args: LispValue) -> List:
    if not isinstance(args, List) or len(args) != 1:
        raise ArityError(f"{op} requires exactly 1 argument")
    xs = args[0]
    if not isinstance(xs, List):
        raise WrongTypeError(f"{op} expects a list, got {xs.to_lisp()}")
    return xs


def first(args: LispValue) -> LispValue:
    """Return the first element of a non-empty list."""
    return _single_list("first", args).first()


def rest(args: LispValue) -> List:
    """Return a new list of all but the first element of a non-empty list."""
    return _single_list("rest", args).rest()


def register(env: Environment) -> None:
    """Register all builtin procedures and constants into the given environment."""
    procedures = {
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        ">": gt,
        ">=": gte,
        "<": lt,
        "<=": lte,
        "==": equals,
        "first": first,
        "rest": rest,
    }
    env.update({name: BuiltinProcedure(name, fn) for name, fn in procedures.items()})
    env.define("PI", Number(math.pi))
    env.define("E", Number(math.e))


class GlobalEnvironment(Environment):
    """Root scope: no outer environment, pre-populated with every builtin."""

    __slots__ = ()

    def __init__(self):
        super().__init__()
        register(self)

    @classmethod
    def new(cls) -> GlobalEnvironment:
        return cls()
