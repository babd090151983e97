"""Built-in functions for the Lispy runtime environment.

This module defines the builtins that touch environments or the outside
world (binding, function construction, printing, loading) and the
registration utility that installs the whole builtin library.
"""
from __future__ import annotations

from typing import Callable

from lispy.types.environment import Environment
from lispy.types.function import Builtin, Closure
from lispy.types.value import Error, EvalList, LiteralList, String, Symbol, Value
from lispy.builtin import list_builtin, number_builtin
from lispy.modules.loader import load_file

LENGTH_MISMATCH = "The symbol list and the value list are different lengths"


# -------------------------------
# Binding
# -------------------------------
def _bind(
    name: str, args: list[Value], bind: Callable[[Symbol, Value], None]
) -> Value:
    if not args or not isinstance(args[0], LiteralList):
        return Error(f"Function '{name}' must be given a literal list of symbols")
    symbols = args[0].cells
    for sym in symbols:
        if not isinstance(sym, Symbol):
            return Error(f"Function '{name}' cannot define a non symbol")

    values = args[1:]
    if len(symbols) != len(values):
        return Error(LENGTH_MISMATCH)

    for sym, value in zip(symbols, values):
        bind(sym, value)
    return EvalList()


def def_builtin(env: Environment, args: list[Value]) -> Value:
    """(def {a b} 1 2): bind globally."""
    return _bind("def", args, env.define)


def put_builtin(env: Environment, args: list[Value]) -> Value:
    """(= {a b} 1 2): bind in the current (innermost) environment."""
    return _bind("=", args, env.put)


def fn_builtin(env: Environment, args: list[Value]) -> Value:
    """(fn {formals} {body}) -> Closure"""
    if len(args) != 2:
        return Error("Function 'fn' was given an improper number of arguments")
    formals, body = args
    if not isinstance(formals, LiteralList):
        return Error("Function 'fn' first argument must be a literal list")
    if not isinstance(body, LiteralList):
        return Error("Function 'fn' second argument must be a literal list")
    for formal in formals:
        if not isinstance(formal, Symbol):
            return Error("Function 'fn' first argument must contain only symbols")
    return Closure(formals, body)


# -------------------------------
# Outside world
# -------------------------------
def print_builtin(env: Environment, args: list[Value]) -> Value:
    """Print the arguments separated by spaces; returns ()."""
    print(" ".join(str(arg) for arg in args))
    return EvalList()


def load_builtin(env: Environment, args: list[Value]) -> Value:
    """(load "file.lspy"): evaluate a file's forms into the calling environment."""
    if not args or not isinstance(args[0], String):
        return Error("Function 'load' must be given a string")
    return load_file(args[0].text, env)


BUILTINS = {
    "def": def_builtin,
    "=": put_builtin,
    "fn": fn_builtin,
    "print": print_builtin,
    "load": load_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    for table in (list_builtin.BUILTINS, number_builtin.BUILTINS, BUILTINS):
        for name, fn in table.items():
            env.put(Symbol(name), Builtin(name, fn))
