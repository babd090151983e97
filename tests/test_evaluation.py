import pytest

from lispy.evaluation.evaluator import evaluate, eval_list
from lispy.reader import read
from lispy.types import (
    Builtin,
    Closure,
    Error,
    EvalList,
    LiteralList,
    Number,
    String,
    Symbol,
)


def run(source, env):
    """Evaluate each top-level form of `source` in `env`, returning the last result."""
    result = None
    for form in read(source).cells:
        result = evaluate(form, env)
    return result


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_values(env):
    for value in (Number(1), String("s"), LiteralList([Symbol("x")]), Error("e")):
        assert evaluate(value, env) is value


def test_symbol_lookup(env):
    env.put("x", Number(42))
    assert evaluate(Symbol("x"), env) == Number(42)
    assert evaluate(Symbol("z"), env) == Error("Unbound Symbol")


def test_builtin_symbols_resolve_to_builtins(env):
    assert isinstance(evaluate(Symbol("head"), env), Builtin)


def test_simple_expression(env):
    assert run("(+ 1 2)", env) == Number(3)


def test_whole_root_evaluates_like_a_form(env):
    # the root node is itself an EvalList
    assert evaluate(read("(+ 1 2)"), env) == Number(3)


def test_empty_form_is_self_evaluating(env):
    assert run("()", env) == EvalList()


def test_single_child_is_returned(env):
    assert run("(5)", env) == Number(5)
    assert run("((((7))))", env) == Number(7)
    assert isinstance(run("(head)", env), Builtin)


def test_head_must_be_a_function(env):
    assert run("(1 2 3)", env) == Error("First Element is not a function")
    assert run("({+} 1)", env) == Error("First Element is not a function")


def test_first_error_wins(env):
    result = run("(+ (/ 1 0) undefined)", env)
    assert result == Error("Cannot divide by 0")
    result = run("(+ undefined (/ 1 0))", env)
    assert result == Error("Unbound Symbol")


def test_children_all_run_before_an_error_is_reported(env):
    result = run("(list (def {a} 1) oops (def {b} 2))", env)
    assert result == Error("Unbound Symbol")
    assert run("b", env) == Number(2)


def test_children_evaluate_left_to_right(env):
    assert run("(list (def {x} 1) (def {x} 2) x)", env) == LiteralList(
        [EvalList(), EvalList(), Number(2)]
    )


def test_eval_list_replaces_children_in_place(env):
    expr = read("(+ 1 (* 2 3))").cells[0]
    assert eval_list(expr, env) == Number(7)
    # the head has been popped off and the nested form replaced by its value
    assert expr.cells == [Number(1), Number(6)]


def test_nested_expressions(env):
    assert run("(+ 1 (* 2 (- 10 6)) (/ 9 3))", env) == Number(12)


def test_literal_lists_are_inert(env):
    assert run("{+ 1 undefined}", env) == LiteralList(
        [Symbol("+"), Number(1), Symbol("undefined")]
    )


def test_nullary_closure_called_with_empty_form(env):
    run("(def {f} (fn {} {+ 1 2}))", env)
    assert run("(f)", env) == Number(3)


def test_closure_awaiting_arguments_is_returned_by_single_form(env):
    run("(def {g} (fn {a} {a}))", env)
    assert isinstance(run("(g)", env), Closure)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(eval {+ 1 2})", Number(3)),
        ("(eval (list + 2 3))", Number(5)),
        ("(eval {})", EvalList()),
        ("(eval (head {(+ 1 1) 5}))", Number(2)),
    ]
)
def test_eval_builtin(env, source, expected):
    assert run(source, env) == expected
