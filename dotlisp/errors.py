class DotLispError(Exception):
    """ Base class for all DotLisp errors"""
    pass

class ParserError(DotLispError):
    """ Raised when source text is not a well-formed expression"""
    pass

class EvaluatorError(DotLispError):
    """ Raised when evaluation of an expression fails"""
    pass

class UnboundSymbolError(EvaluatorError):
    """ Raised when a symbol is used before it is bound"""

class ArityError(EvaluatorError):
    """ Raised when the number of arguments passed to a form or procedure is incorrect"""

class WrongTypeError(EvaluatorError):
    """ Raised when an argument is not the expected kind of expression"""

class EmptyListError(EvaluatorError):
    """ Raised when first/rest is applied to an empty list"""

class NotCallableError(EvaluatorError):
    """ Raised when the operator of a call form is not a procedure"""

class DivisionByZeroError(EvaluatorError):
    """ Raised when / is given a zero divisor"""

class RecursionDepthError(EvaluatorError):
    """ Raised when evaluation nests deeper than the configured limit"""
