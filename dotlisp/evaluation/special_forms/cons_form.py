from dotlisp import EvaluatorFn, LispValue
from dotlisp.errors import ArityError, WrongTypeError
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List


def cons_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (cons head list)
    Returns a new List with `head` prepended; the original list is untouched.
    """
    if len(tail) != 2:
        raise ArityError("cons requires exactly 2 arguments")

    head = evaluate_fn(tail[0], env)
    rest = evaluate_fn(tail[1], env)
    if not isinstance(rest, List):
        raise WrongTypeError(f"cons expects a list as its second argument, got {rest.to_lisp()}")
    return rest.cons(head)
