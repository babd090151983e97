"""List builtins: construction, slicing, joining and evaluation of literal lists."""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.value import Error, EvalList, LiteralList, Value
from lispy.evaluation.evaluator import evaluate


def _single_list(name: str, args: list[Value], allow_empty: bool = False) -> Value | None:
    """Validate the one-LiteralList argument contract; return an Error or None."""
    if len(args) != 1:
        return Error(f"Function '{name}' was given too many arguments")
    if not isinstance(args[0], LiteralList):
        return Error(f"Function '{name}' must be given a literal list as an argument")
    if not allow_empty and not args[0].cells:
        return Error(f"Function '{name}' passed in an empty literal list")
    return None


def head(env: Environment, args: list[Value]) -> Value:
    """{1 2 3} -> {1}"""
    if (error := _single_list("head", args)) is not None:
        return error
    return LiteralList(args[0].cells[:1])


def tail(env: Environment, args: list[Value]) -> Value:
    """{1 2 3} -> {2 3}"""
    if (error := _single_list("tail", args)) is not None:
        return error
    return LiteralList(args[0].cells[1:])


def list_builtin(env: Environment, args: list[Value]) -> Value:
    return LiteralList(args)


def eval_builtin(env: Environment, args: list[Value]) -> Value:
    """Evaluate a literal list as if it had been written in parentheses."""
    if (error := _single_list("eval", args, allow_empty=True)) is not None:
        return error
    return evaluate(args[0].as_eval(), env)


def join(env: Environment, args: list[Value]) -> Value:
    for arg in args:
        if not isinstance(arg, LiteralList):
            return Error("One of the arguments to join was not a literal list")
    joined = LiteralList()
    for arg in args:
        joined.cells.extend(arg.cells)
    return joined


BUILTINS = {
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
}
