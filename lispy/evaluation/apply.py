"""Application engine for Lispy.

This module centralizes function application semantics for the interpreter:
- Builtins are called with the caller's environment and the evaluated args.
- Closures bind arguments one formal at a time. Supplying fewer arguments
  than formals returns a new closure awaiting the rest (currying); the rest
  marker `&` collects every remaining argument into a LiteralList.
- A fully applied closure evaluates its body in its own environment, whose
  parent becomes the *caller's* environment for that call.
"""

from __future__ import annotations

import logging

from lispy import EvaluatorFn
from lispy.types.environment import Environment
from lispy.types.function import Builtin, Closure
from lispy.types.value import Error, LiteralList, Symbol, Value

logger = logging.getLogger(__name__)

REST_MARKER = Symbol("&")

TOO_MANY_ARGUMENTS = "Function passed too many arguments"
BAD_REST_MARKER = "Symbol & not followed by a single symbol."
NOT_A_FUNCTION = "First Element is not a function"


def apply_closure(
    fn: Closure,
    args: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply a Closure value.

    Parameters:
    - fn: The closure being applied. It is copied first, so the caller's
      value is never modified.
    - args: The already-evaluated argument values.
    - env: The calling environment; becomes the parent of the closure's
      environment once every formal is bound.
    - evaluate_fn: Evaluator used to run the body.
    """
    fn = fn.copy()
    formals = fn.formals
    supplied = list(args)

    while supplied:
        if not formals.cells:
            return Error(TOO_MANY_ARGUMENTS)

        formal = formals.pop(0)
        if formal == REST_MARKER:
            if len(formals) != 1:
                return Error(BAD_REST_MARKER)
            fn.env.put(formals.pop(0), LiteralList(supplied))
            break

        fn.env.put(formal, supplied.pop(0))

    if formals.cells:
        logger.debug("Partial application, awaiting %s", formals)
        return fn

    fn.env.parent = env
    logger.debug("Applying %s with bindings %s", fn, fn.env)
    return evaluate_fn(fn.body.as_eval(), fn.env)


def apply(
    fn: Value,
    args: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a Builtin or a Closure to evaluated arguments."""
    if isinstance(fn, Builtin):
        return fn(env, args)
    if isinstance(fn, Closure):
        return apply_closure(fn, args, env, evaluate_fn)
    return Error(NOT_A_FUNCTION)
