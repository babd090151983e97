from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPY_DIR / 'prelude'
_DEFAULT_LOAD_DIRS: list[Path] = []

PRELUDE_FILE = 'std.lspy'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Extra roots searched by `load` for relative paths."""
    return paths_from_env('LISPY_LOAD_PATH', _DEFAULT_LOAD_DIRS)


def get_prelude_root() -> Path:
    roots = paths_from_env('LISPY_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent
