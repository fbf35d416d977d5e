"""Registry of special forms for the DotLisp evaluator.

Maps keyword Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary
procedure application. Handlers receive the unevaluated operands, the
current environment and the evaluator function.
"""

from dotlisp.types.symbol import Symbol
from dotlisp.evaluation.special_forms.quote_forms import (
    quote_form,
    quasiquote_form,
    unquote_form,
    unquote_splice_form,
)
from dotlisp.evaluation.special_forms.if_form import if_form
from dotlisp.evaluation.special_forms.define_form import define_form
from dotlisp.evaluation.special_forms.lambda_form import lambda_form
from dotlisp.evaluation.special_forms.do_form import do_form
from dotlisp.evaluation.special_forms.cons_form import cons_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("unquote"): unquote_form,
    Symbol("unquotesplicing"): unquote_splice_form,
    Symbol("if"): if_form,
    Symbol("def"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("fn"): lambda_form,
    Symbol("do"): do_form,
    Symbol("cons"): cons_form,
}
