import io
import string

import pytest
from hypothesis import given, strategies as st

from dotlisp.errors import ParserError
from dotlisp.reader.parser import InPort, parse, parse_all, parse_atom, read_from_tokens, tokenize
from dotlisp.reader.printer import to_lisp_text
from dotlisp.types import List, Number, Str, Symbol, TRUE, FALSE

QUOTE = Symbol("quote")


def _l(*items):
    return List(items)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+ 1 (* 2 3))", ["(", "+", "1", "(", "*", "2", "3", ")", ")"]),
        ("  a   b\n c ", ["a", "b", "c"]),
        ("()", ["(", ")"]),
        ("", []),
    ],
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ('"hello"', Str("hello")),
        ('""', Str("")),
        ("true", TRUE),
        ("false", FALSE),
        ("42", Number(42)),
        ("-7", Number(-7)),
        ("3.14", Number(3.14)),
        ("1e3", Number(1000.0)),
        (".5", Number(0.5)),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("1a", Symbol("1a")),
        ("True", Symbol("True")),
    ],
)
def test_parse_atom(token, expected):
    assert parse_atom(token) == expected


def test_parse_atom_exactness():
    assert not parse_atom("42").is_float()
    assert parse_atom("42.0").is_float()


@pytest.mark.parametrize("digits", [400, 5000])
def test_parse_atom_integer_beyond_float_range(digits):
    atom = parse_atom("1" + "0" * digits)
    assert atom.is_float()
    assert atom.raw == float("inf")
    assert parse_atom("-1" + "0" * digits).raw == float("-inf")


def test_read_from_tokens_consumes_one_expression():
    tokens = tokenize("(a (b c)) d")
    expr = read_from_tokens(tokens)
    assert expr == _l(Symbol("a"), _l(Symbol("b"), Symbol("c")))
    assert tokens == ["d"]


def test_read_from_tokens_expands_quote_tokens():
    assert read_from_tokens(["'", "x"]) == _l(QUOTE, Symbol("x"))


@pytest.mark.parametrize("tokens", [[], [")"], ["(", "1", "2"], ["'"]])
def test_read_from_tokens_errors(tokens):
    with pytest.raises(ParserError):
        read_from_tokens(tokens)


def test_inport_tokens():
    port = InPort("'(a ,b ,@c `d) ; comment ( here\n\"two words\"")
    tokens = []
    while (tok := port.next_token()) is not None:
        tokens.append(tok)
    assert tokens == ["'", "(", "a", ",", "b", ",@", "c", "`", "d", ")", '"two words"']


@pytest.mark.parametrize(
    "source, expected",
    [
        ("'x", _l(QUOTE, Symbol("x"))),
        ("'(1 2)", _l(QUOTE, _l(Number(1), Number(2)))),
        (
            "`(a ,b ,@c)",
            _l(
                Symbol("quasiquote"),
                _l(
                    Symbol("a"),
                    _l(Symbol("unquote"), Symbol("b")),
                    _l(Symbol("unquotesplicing"), Symbol("c")),
                ),
            ),
        ),
        ('("a b" c)', _l(Str("a b"), Symbol("c"))),
        ("(a) (b)", _l(Symbol("a"))),
        ("; leading comment\n42", Number(42)),
    ],
)
def test_parse(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize("source", ["", "   ", "; nothing", "(1 2", "(1 (2)", ")", "'", '"abc'])
def test_parse_errors(source):
    with pytest.raises(ParserError):
        parse(source)


def test_read_all_spans_lines():
    exprs = parse_all("(+ 1\n   2)\n(* 3 4) ; trailing\n")
    assert [to_lisp_text(e) for e in exprs] == ["(+ 1 2)", "(* 3 4)"]


class _LineSource:
    """Hands out lines one at a time and records how many were pulled."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.pulled = 0

    def readline(self):
        if not self.lines:
            return ""
        self.pulled += 1
        return self.lines.pop(0)


def test_inport_pulls_lines_on_demand():
    source = _LineSource(["(first\n", "  '(1 2))\n", "second\n"])
    port = InPort(source)
    assert to_lisp_text(port.read()) == "(first (quote (1 2)))"
    assert source.pulled == 2
    assert port.read() == Symbol("second")
    assert port.read() is None


def test_inport_reads_file_objects():
    port = InPort(io.StringIO("1 2\n3"))
    assert list(port.read_all()) == [Number(1), Number(2), Number(3)]


def test_discard_line_drops_rest_of_line():
    port = InPort("a b c\nd")
    assert port.read() == Symbol("a")
    port.discard_line()
    assert port.read() == Symbol("d")


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 2)",
        "(a (b 1.5) \"s t\" true false)",
        "(def f (fn (x y) (if (< x y) x y)))",
        "()",
        "-3",
    ],
)
def test_round_trip_examples(source):
    assert to_lisp_text(parse(source)) == source


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.from_regex(r"[a-z][a-z0-9?!*-]{0,8}", fullmatch=True).filter(
    lambda s: s not in ("true", "false")
)
int_strat = st.integers(min_value=-10**6, max_value=10**6).map(str)
float_strat = st.floats(allow_nan=False, allow_infinity=False).map(repr)
string_strat = st.text(
    alphabet=string.ascii_letters + string.digits + " ()';,`@-+*/", max_size=10
).map(lambda s: f'"{s}"')
bool_strat = st.sampled_from(["true", "false"])

atom_strat = st.one_of(symbol_strat, int_strat, float_strat, string_strat, bool_strat)
sexpr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=4).map(lambda xs: "(" + " ".join(xs) + ")"),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexpr_strat)
def test_round_trip_canonical_text(source):
    assert to_lisp_text(parse(source)) == source


@given(st.lists(sexpr_strat, min_size=1, max_size=4))
def test_read_all_yields_each_expression(sources):
    program = "\n".join(sources)
    assert [to_lisp_text(e) for e in parse_all(program)] == sources
