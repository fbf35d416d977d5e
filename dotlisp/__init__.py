# Core type aliases for DotLisp's data model.
# Every value and every form is an instance of one of the Expression variants
# in dotlisp.types (Symbol, Number, Bool, Str, List, BuiltinProcedure, Closure).
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same base class and are interchangeable.

from typing import Callable

from dotlisp.types.expression import Expression

LispValue = Expression
SExpression = Expression

# Evaluator function type: evaluator used inside special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
