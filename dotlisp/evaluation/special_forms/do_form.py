from dotlisp import EvaluatorFn, LispValue
from dotlisp.errors import ArityError
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List


def do_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if tail.is_empty():
        raise ArityError("do requires at least one expression")
    result: LispValue = None  # type: ignore[assignment]
    for e in tail:
        result = evaluate_fn(e, env)
    return result
