from dotlisp import EvaluatorFn, LispValue
from dotlisp.errors import ArityError, WrongTypeError
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List
from dotlisp.types.symbol import Symbol


def define_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (def name value)
    Binds in the current scope only and returns the bound value.
    """
    if len(tail) != 2:
        raise ArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise WrongTypeError(f"def expects a symbol name, got {name.to_lisp()}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
