import pytest
from loguru import logger

from dotlisp.errors import RecursionDepthError, UnboundSymbolError
from dotlisp.evaluation.evaluator import Evaluator
from dotlisp.interpreter import Interpreter, resolve_source
from dotlisp.types import Number


def test_eval_returns_last_value():
    itp = Interpreter()
    assert itp.eval("(def x 2) (* x 21)") == Number(42)


@pytest.mark.parametrize("code", ["", "   ", "; only a comment\n"])
def test_eval_without_forms(code):
    assert Interpreter().eval(code) is None


def test_definitions_persist_between_calls():
    itp = Interpreter()
    itp.eval("(def counter 1)")
    itp.eval("(def counter (+ counter 1))")
    assert itp.eval("counter") == Number(2)


def test_errors_propagate():
    with pytest.raises(UnboundSymbolError):
        Interpreter().eval("(+ 1 missing)")


def test_load_file(tmp_path):
    src = tmp_path / "lib.lisp"
    src.write_text(
        "; helpers\n"
        "(def square (fn (x)\n"
        "  (* x x)))\n"
        "(square 9)\n",
        encoding="utf-8",
    )
    itp = Interpreter()
    assert itp.load(src) == Number(81)
    assert itp.eval("(square 3)") == Number(9)


def test_load_searches_dotlisp_path(tmp_path, monkeypatch):
    (tmp_path / "std").mkdir()
    (tmp_path / "std" / "core.lisp").write_text("(def answer 42)", encoding="utf-8")
    monkeypatch.setenv("DOTLISP_PATH", str(tmp_path))
    assert resolve_source("std/core.lisp") == tmp_path / "std" / "core.lisp"
    itp = Interpreter()
    itp.load("std/core.lisp")
    assert itp.eval("answer") == Number(42)


def test_load_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("DOTLISP_PATH", str(tmp_path))
    with pytest.raises(FileNotFoundError):
        Interpreter().load("does-not-exist.lisp")


def test_depth_guard_is_logged():
    messages = []
    handler_id = logger.add(messages.append, level="WARNING")
    try:
        itp = Interpreter(evaluator=Evaluator(max_depth=20))
        itp.eval("(def spin (fn () (spin)))")
        with pytest.raises(RecursionDepthError):
            itp.eval("(spin)")
    finally:
        logger.remove(handler_id)
    assert any("evaluator.depth_exceeded" in m for m in messages)
