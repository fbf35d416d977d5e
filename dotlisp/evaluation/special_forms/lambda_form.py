from dotlisp import EvaluatorFn, LispValue
from dotlisp.errors import ArityError, WrongTypeError
from dotlisp.types.closure import Closure
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List
from dotlisp.types.symbol import Symbol


def lambda_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda (params) body) and its alias (fn (params) body) take exactly one body form.
    if len(tail) != 2:
        raise ArityError("lambda requires a parameter list and a body")

    params, body = tail
    if not isinstance(params, List) or not all(isinstance(p, Symbol) for p in params):
        raise WrongTypeError(f"Parameter list expected, got {params.to_lisp()}")

    return Closure([p.name for p in params], body, env)
