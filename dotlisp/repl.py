"""Read-eval-print loop over text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from dotlisp.errors import DotLispError, ParserError
from dotlisp.interpreter import Interpreter
from dotlisp.reader.parser import InPort
from dotlisp.reader.printer import to_lisp_text

PROMPT = "dotlisp> "


class _PromptingStream:
    """Writes a prompt each time the reader pulls another line."""

    def __init__(self, stdin: TextIO, stdout: TextIO, prompt: str):
        self.stdin = stdin
        self.stdout = stdout
        self.prompt = prompt

    def readline(self) -> str:
        self.stdout.write(self.prompt)
        self.stdout.flush()
        return self.stdin.readline()


def run_repl(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str = PROMPT,
    interpreter: Interpreter | None = None,
) -> None:
    """Read, evaluate and print each top-level expression until end of input.

    Errors abort only the current expression; the loop reports them and
    carries on with the next input.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    itp = interpreter if interpreter is not None else Interpreter()
    port = InPort(_PromptingStream(stdin, stdout, prompt))
    while True:
        try:
            expr = port.read()
            if expr is None:
                break
            result = itp.evaluator.eval(expr, itp.env)
        except DotLispError as e:
            logger.debug("repl.error type={} message={}", type(e).__name__, e)
            if isinstance(e, ParserError):
                port.discard_line()
            stdout.write(f"error: {e}\n")
            continue
        stdout.write(to_lisp_text(result) + "\n")
    stdout.write("\n")
