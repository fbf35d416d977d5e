from dotlisp import EvaluatorFn, LispValue
from dotlisp.errors import ArityError
from dotlisp.types.atoms import Bool
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List


def if_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (if condition then-expr else-expr)
    Only Bool(false) selects the else branch; the other branch is never evaluated.
    """
    if len(tail) != 3:
        raise ArityError("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env)
    if isinstance(cond, Bool) and not cond.value:
        return evaluate_fn(tail[2], env)
    return evaluate_fn(tail[1], env)
