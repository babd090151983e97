"""Arithmetic, comparison and conditional builtins.

Numbers are 64-bit floats. Arithmetic folds its arguments left to right;
comparisons answer with Number 1 or 0.
"""

from __future__ import annotations

import operator
from typing import Callable

from lispy.types.environment import Environment
from lispy.types.value import Error, LiteralList, Number, Value
from lispy.evaluation.evaluator import evaluate

DIVIDE_BY_ZERO = "Cannot divide by 0"
NOT_A_NUMBER = "Cannot operate on a non number"

TRUE = 1.0


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(op: str, args: list[Value]) -> Value:
    if not args:
        return Error(f"Function '{op}' passed no arguments")
    for arg in args:
        if not isinstance(arg, Number):
            return Error(NOT_A_NUMBER)

    result = args[0].value
    if op == "-" and len(args) == 1:
        return Number(-result)

    for arg in args[1:]:
        y = arg.value
        if op == "+":
            result += y
        elif op == "-":
            result -= y
        elif op == "*":
            result *= y
        elif op == "/":
            if y == 0:
                return Error(DIVIDE_BY_ZERO)
            result /= y
        elif op == "max":
            result = max(result, y)
        elif op == "min":
            result = min(result, y)
    return Number(result)


def add(env: Environment, args: list[Value]) -> Value:
    return _fold("+", args)


def sub(env: Environment, args: list[Value]) -> Value:
    return _fold("-", args)


def mul(env: Environment, args: list[Value]) -> Value:
    return _fold("*", args)


def div(env: Environment, args: list[Value]) -> Value:
    return _fold("/", args)


def maximum(env: Environment, args: list[Value]) -> Value:
    return _fold("max", args)


def minimum(env: Environment, args: list[Value]) -> Value:
    return _fold("min", args)


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, args: list[Value], test: Callable[[Value, Value], bool],
             numeric: bool = True) -> Value:
    # Only the first two arguments take part; any extras are ignored.
    if len(args) < 2:
        return Error(f"Function '{name}' needs two arguments")
    first, second = args[0], args[1]
    if numeric:
        if not (isinstance(first, Number) and isinstance(second, Number)):
            return Error(f"Function '{name}' must be given numbers")
        first, second = first.value, second.value
    return Number(1 if test(first, second) else 0)


def lt(env: Environment, args: list[Value]) -> Value:
    return _compare("<", args, operator.lt)


def gt(env: Environment, args: list[Value]) -> Value:
    return _compare(">", args, operator.gt)


def lte(env: Environment, args: list[Value]) -> Value:
    return _compare("<=", args, operator.le)


def gte(env: Environment, args: list[Value]) -> Value:
    return _compare(">=", args, operator.ge)


def equals(env: Environment, args: list[Value]) -> Value:
    """Structural equality for any two values."""
    return _compare("==", args, operator.eq, numeric=False)


# -------------------------------
# Conditional
# -------------------------------
def if_builtin(env: Environment, args: list[Value]) -> Value:
    """(if cond {then} {else}): only a condition of exactly 1 selects `then`."""
    if len(args) != 3:
        return Error("Function 'if' must be passed three arguments")
    cond, then_branch, else_branch = args
    if not isinstance(cond, Number):
        return Error("Function 'if' first argument must be a number")
    if not isinstance(then_branch, LiteralList):
        return Error("Function 'if' second argument must be a literal list")
    if not isinstance(else_branch, LiteralList):
        return Error("Function 'if' third argument must be a literal list")

    branch = then_branch if cond.value == TRUE else else_branch
    return evaluate(branch.as_eval(), env)


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "max": maximum,
    "min": minimum,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "==": equals,
    "if": if_builtin,
}
