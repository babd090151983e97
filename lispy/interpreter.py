from __future__ import annotations

import logging
from typing import Iterator, Literal

from lispy.errors import LispyLoadError
from lispy.reader import read
from lispy.types.environment import Environment
from lispy.types.value import Error, EvalList, Value
from lispy.builtin import register
from lispy.evaluation.evaluator import evaluate
from lispy.modules.loader import load_file, load_prelude

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A Lispy session: owns the root Environment and evaluates source text
    against it, one top-level form at a time. Definitions persist across
    calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = None):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate library code; a form that yields an Error aborts."""
        for result in self.eval_all(code):
            if isinstance(result, Error):
                raise LispyLoadError(f"Prelude form failed: {result}")

    def iter_eval(self, code: str) -> Iterator[Value]:
        """Yield the result of each top-level form in `code` as it is evaluated.

        The whole text is parsed first: LispySyntaxError is raised before
        any form runs.
        """
        forms = read(code)
        for form in forms.cells:
            result = evaluate(form, self.env)
            if isinstance(result, Error):
                logger.debug("%s evaluated to error %s", form, result)
            yield result

    def eval_all(self, code: str) -> list[Value]:
        """Evaluate every top-level form in `code`, returning each result."""
        return list(self.iter_eval(code))

    def eval(self, code: str) -> Value:
        """Evaluate `code` and return the value of its last form (or `()`)."""
        results = self.eval_all(code)
        if not results:
            return EvalList()
        return results[-1]

    def load(self, path: str) -> Value:
        """Load a source file into the session, as the `load` builtin does."""
        return load_file(path, self.env)
