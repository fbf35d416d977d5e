from dotlisp import SExpression


def to_lisp_text(expr: SExpression) -> str:
    """Canonical text of an expression; lists print their items space-joined in parens."""
    return expr.to_lisp()
