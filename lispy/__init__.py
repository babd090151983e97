# Core type aliases for Lispy.
#
# Runtime data is modelled by the Value classes in `lispy.types`; the aliases
# below name the callables passed between the evaluator, the apply engine and
# the builtins. They are defined before the submodule imports at the bottom of
# this file because those submodules import them from here.

from typing import Any, Callable

__version__ = "0.1.0"

# Evaluator function type: (expr, env) -> Value
EvaluatorFn = Callable[..., Any]

from lispy.interpreter import Interpreter  # noqa: E402

__all__ = ["Interpreter", "EvaluatorFn", "__version__"]
