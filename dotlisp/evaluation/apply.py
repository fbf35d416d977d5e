"""Application engine for DotLisp.

Centralizes procedure application for the evaluator:
- Builtin procedures receive the whole packaged argument List.
- Closures bind their parameters positionally in a new child of the
  environment they captured and evaluate their body there.

Argument values are already evaluated when they reach this module.
"""

from dotlisp import LispValue, EvaluatorFn
from dotlisp.errors import NotCallableError
from dotlisp.types.closure import Closure
from dotlisp.types.lisp_list import List
from dotlisp.types.procedure import BuiltinProcedure


def apply_closure(fn: Closure, args: List, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a user-defined Closure.

    Raises ArityError (from the new Environment) if the argument count does
    not match the closure's parameter count.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(procedure: LispValue, args: List, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a BuiltinProcedure or a Closure to evaluated arguments.

    - For builtins, invoke the native action with the argument List.
    - For closures, defer to apply_closure.
    - Otherwise, raise NotCallableError.
    """
    if isinstance(procedure, BuiltinProcedure):
        return procedure(args)
    if isinstance(procedure, Closure):
        return apply_closure(procedure, args, evaluate_fn)
    raise NotCallableError(f"Cannot apply non-procedure {procedure.to_lisp()}")
