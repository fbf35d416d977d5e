from dotlisp.types.expression import Expression, Atom
from dotlisp.types.symbol import Symbol
from dotlisp.types.atoms import Number, Bool, Str, TRUE, FALSE
from dotlisp.types.lisp_list import List
from dotlisp.types.procedure import BuiltinProcedure
from dotlisp.types.environment import Environment
from dotlisp.types.closure import Closure

__all__ = [
    "Expression",
    "Atom",
    "Symbol",
    "Number",
    "Bool",
    "Str",
    "TRUE",
    "FALSE",
    "List",
    "BuiltinProcedure",
    "Environment",
    "Closure",
]
