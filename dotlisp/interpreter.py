from __future__ import annotations
from pathlib import Path
from typing import Optional

from loguru import logger

from dotlisp import LispValue
from dotlisp.builtin.env_builtin import GlobalEnvironment
from dotlisp.config import get_load_roots
from dotlisp.evaluation.evaluator import Evaluator
from dotlisp.reader.parser import InPort
from dotlisp.types.environment import Environment


def resolve_source(path: str | Path) -> Optional[Path]:
    """Find `path` as given, then underneath each DOTLISP_PATH root."""
    candidate = Path(path)
    if candidate.is_file():
        return candidate
    if candidate.is_absolute():
        return None
    for root in get_load_roots():
        rooted = root / candidate
        if rooted.is_file():
            return rooted
    return None


class Interpreter:
    """
    Orchestrates reading and evaluating DotLisp code.
    Maintains one global Environment across calls, so definitions persist
    from one top-level input to the next.
    """

    def __init__(
        self,
        env: Environment | None = None,
        evaluator: Evaluator | None = None,
    ):
        self.env: Environment = env if env is not None else GlobalEnvironment()
        self.evaluator: Evaluator = evaluator if evaluator is not None else Evaluator()

    def eval_port(self, port: InPort) -> Optional[LispValue]:
        result: Optional[LispValue] = None
        for expr in port.read_all():
            result = self.evaluator.eval(expr, self.env)
        return result

    def eval(self, code: str) -> Optional[LispValue]:
        """Evaluate every form in `code`; return the last value, or None if there were none."""
        return self.eval_port(InPort(code))

    def load(self, path: str | Path) -> Optional[LispValue]:
        """Evaluate a source file, reading it incrementally."""
        source = resolve_source(path)
        if source is None:
            raise FileNotFoundError(f"Cannot find source file '{path}' (searched DOTLISP_PATH)")
        logger.debug("interpreter.load path={}", source)
        with source.open(encoding="utf-8") as fh:
            return self.eval_port(InPort(fh))
