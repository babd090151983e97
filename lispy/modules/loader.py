from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

from lispy.config import PRELUDE_FILE, get_load_roots, get_prelude_root
from lispy.errors import LispySyntaxError
from lispy.reader import read
from lispy.types.environment import Environment
from lispy.types.value import Error, EvalList, Value
from lispy.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def resolve_path(path: str) -> Path:
    """Resolve a `load` path: as given first, then under each LISPY_LOAD_PATH root."""
    p = Path(path)
    if p.is_absolute() or p.is_file():
        return p
    for root in get_load_roots():
        candidate = root / p
        if candidate.is_file():
            return candidate
    return p


def load_source(code: str, env: Environment) -> Value:
    """Evaluate every top-level form of `code` in `env`.

    A form that evaluates to an Error is printed and loading carries on with
    the next form. Text that cannot be parsed yields an Error value.
    """
    try:
        forms = read(code)
    except LispySyntaxError as exc:
        return Error(f"Cannot parse source: {exc}")

    for form in forms.cells:
        result = evaluate(form, env)
        if isinstance(result, Error):
            logger.debug("Form %s failed: %s", form, result)
            print(result)
    return EvalList()


def load_file(path: str, env: Environment) -> Value:
    """Read, parse and evaluate a source file into `env`."""
    target = resolve_path(path)
    logger.info("Loading %s", target)
    try:
        code = target.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", target, exc)
        return Error(str(exc))
    return load_source(code, env)


def prelude_path() -> Optional[Path]:
    p = get_prelude_root() / PRELUDE_FILE
    return p if p.is_file() else None


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate the standard prelude into an interpreter, if one is installed."""
    p = prelude_path()
    if p is None:
        logger.info("No prelude found under %s", get_prelude_root())
        return
    logger.info("Loading prelude %s", p)
    itp.eval_prelude(p.read_text(encoding='utf-8'))
