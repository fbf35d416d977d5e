from dotlisp import SExpression, LispValue, EvaluatorFn
from dotlisp.errors import ArityError, WrongTypeError, EvaluatorError
from dotlisp.types.environment import Environment
from dotlisp.types.lisp_list import List
from dotlisp.types.symbol import Symbol

QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquotesplicing")


def _is_form(expr: SExpression, keyword: Symbol) -> bool:
    return isinstance(expr, List) and len(expr) == 2 and expr[0] == keyword


def eval_quasiquote(
    expr: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 1,
) -> SExpression:
    # Non-list atoms returned as-is
    if not isinstance(expr, List):
        return expr

    if _is_form(expr, QUASIQUOTE):
        return List((QUASIQUOTE, eval_quasiquote(expr[1], env, evaluate_fn, depth + 1)))

    if _is_form(expr, UNQUOTE):
        if depth == 1:
            return evaluate_fn(expr[1], env)
        return List((UNQUOTE, eval_quasiquote(expr[1], env, evaluate_fn, depth - 1)))

    if _is_form(expr, UNQUOTE_SPLICING):
        if depth == 1:
            raise EvaluatorError("unquotesplicing is only valid inside a list")
        return List((UNQUOTE_SPLICING, eval_quasiquote(expr[1], env, evaluate_fn, depth - 1)))

    result: list[SExpression] = []
    for item in expr:
        if _is_form(item, UNQUOTE_SPLICING) and depth == 1:
            spliced = evaluate_fn(item[1], env)
            if not isinstance(spliced, List):
                raise WrongTypeError("unquotesplicing must produce a list")
            result.extend(spliced)
            continue
        result.append(eval_quasiquote(item, env, evaluate_fn, depth))
    return List(result)


def quote_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise ArityError("quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise ArityError("quasiquote expects exactly 1 argument")
    # The template is data; only unquoted parts are evaluated.
    return eval_quasiquote(tail[0], env, evaluate_fn)


def unquote_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise EvaluatorError("unquote not valid outside of quasiquote")


def unquote_splice_form(tail: List, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    raise EvaluatorError("unquotesplicing not valid outside of quasiquote")
