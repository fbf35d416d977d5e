from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_LOAD_DIRS: list[Path] = []
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    return paths_from_env('DOTLISP_PATH', _DEFAULT_LOAD_DIRS)


def get_max_depth() -> int:
    raw = os.environ.get('DOTLISP_MAX_DEPTH')
    if not raw:
        return _DEFAULT_MAX_DEPTH
    try:
        depth = int(raw)
    except ValueError:
        raise ValueError(f"DOTLISP_MAX_DEPTH must be an integer, got {raw!r}") from None
    if depth < 1:
        raise ValueError(f"DOTLISP_MAX_DEPTH must be positive, got {depth}")
    return depth


def get_log_level() -> str:
    return os.environ.get('DOTLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
