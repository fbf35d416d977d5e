from __future__ import annotations

import argparse
import sys

from dotlisp.errors import DotLispError
from dotlisp.interpreter import Interpreter
from dotlisp.logging_utils import configure_logging
from dotlisp.reader.printer import to_lisp_text
from dotlisp.repl import run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dotlisp", description="DotLisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to load, in order")
    parser.add_argument(
        "-e", "--eval", dest="exprs", action="append", default=[],
        help="evaluate EXPR and print the result (may be repeated)",
    )
    parser.add_argument("--log-level", default=None, help="override DOTLISP_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    itp = Interpreter()
    try:
        for path in args.files:
            itp.load(path)
        for code in args.exprs:
            result = itp.eval(code)
            if result is not None:
                print(to_lisp_text(result))
    except (DotLispError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not args.files and not args.exprs:
        run_repl(interpreter=itp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
