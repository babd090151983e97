"""Core evaluator for the Lispy interpreter.

Symbols are looked up, EvalLists are evaluated and applied, everything else
evaluates to itself. Errors are values: the first Error among a list's
evaluated children becomes the result of the whole list.

Evaluation is plain recursion with no tail-call elimination, so nesting
depth is bounded by Python's recursion limit.
"""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.function import Builtin, Closure
from lispy.types.value import Error, EvalList, Symbol, Value
from lispy.evaluation.apply import apply, NOT_A_FUNCTION


def evaluate(expr: Value, env: Environment) -> Value:
    """Evaluate a single value in `env`."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case EvalList():
            return eval_list(expr, env)

    # --- Atoms, literal lists, errors and functions return as-is ---
    return expr


def eval_list(expr: EvalList, env: Environment) -> Value:
    """Evaluate an EvalList in place and apply its head to its tail."""
    cells = expr.cells

    # Children run left to right; `def` and `=` make the order observable.
    for i, cell in enumerate(cells):
        cells[i] = evaluate(cell, env)

    for cell in cells:
        if isinstance(cell, Error):
            return cell

    if not cells:
        return expr

    if len(cells) == 1:
        only = expr.pop(0)
        # (f) calls a closure that takes no arguments
        if isinstance(only, Closure) and not only.formals.cells:
            return apply(only, [], env, evaluate)
        return only

    head = expr.pop(0)
    if not isinstance(head, (Builtin, Closure)):
        return Error(NOT_A_FUNCTION)
    return apply(head, expr.cells, env, evaluate)
