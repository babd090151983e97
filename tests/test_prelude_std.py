import pytest

from lispy.errors import LispyLoadError, LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.types import Closure, Error, LiteralList, Number


def lit(*values):
    return LiteralList(Number(v) for v in values)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("nil", LiteralList()),
        ("true", Number(1)),
        ("false", Number(0)),
        ("(not true)", Number(0)),
        ("(not false)", Number(1)),
        ("(flip - 1 10)", Number(9)),
        ("(unpack + {1 2 3})", Number(6)),
        ("(pack head 1 2 3)", lit(1)),
        ("(first {7 8 9})", Number(7)),
        ("(second {7 8 9})", Number(8)),
        ("(len {})", Number(0)),
        ("(len {1 {2 3} 4})", Number(3)),
        ("(nth 0 {10 20 30})", Number(10)),
        ("(nth 2 {10 20 30})", Number(30)),
        ("(last {1 2 3})", Number(3)),
        ("(reverse {1 2 3})", lit(3, 2, 1)),
        ("(reverse nil)", LiteralList()),
        ("(map (fn {x} {* x 2}) {1 2 3})", lit(2, 4, 6)),
        ("(map - {1 2})", lit(-1, -2)),
        ("(filter (fn {x} {> x 1}) {1 2 3})", lit(2, 3)),
        ("(filter (fn {x} {== x 0}) {1 2 3})", LiteralList()),
        ("(foldl + 0 {1 2 3})", Number(6)),
        ("(foldl - 10 {1 2})", Number(7)),
        ("(sum {1 2 3 4})", Number(10)),
        ("(product {1 2 3 4})", Number(24)),
        ("(sum nil)", Number(0)),
    ]
)
def test_prelude_functions(std, source, expected):
    assert std.eval(source) == expected


def test_fun_defines_a_named_function(std):
    std.eval("(fun {add3 a b c} {+ a b c})")
    assert std.eval("(add3 1 2 3)") == Number(6)
    assert isinstance(std.eval("(add3 1)"), Closure)


def test_fun_defines_globally_from_inside_a_function(std):
    std.eval("(fun {make} {fun {made x} {* x 10}})")
    std.eval("(make)")
    assert std.eval("(made 2)") == Number(20)


def test_prelude_functions_compose(std):
    result = std.eval("(sum (map (fn {x} {* x x}) (filter (fn {x} {> x 2}) {1 2 3 4})))")
    assert result == Number(25)


def test_prelude_absent_without_auto(interp):
    assert interp.eval("(len {1})") == Error("Unbound Symbol")


def test_prelude_root_from_environment(tmp_path, monkeypatch):
    (tmp_path / "std.lspy").write_text("(def {answer} 42)\n", encoding="utf-8")
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(tmp_path))
    itp = Interpreter(prelude="auto")
    assert itp.eval("answer") == Number(42)
    assert itp.eval("len") == Error("Unbound Symbol")


def test_prelude_path_may_name_the_file(tmp_path, monkeypatch):
    prelude = tmp_path / "std.lspy"
    prelude.write_text("(def {answer} 7)\n", encoding="utf-8")
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(prelude))
    assert Interpreter(prelude="auto").eval("answer") == Number(7)


def test_missing_prelude_is_not_an_error(tmp_path, monkeypatch):
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(tmp_path / "nowhere"))
    itp = Interpreter(prelude="auto")
    assert itp.eval("(+ 1 1)") == Number(2)
    assert itp.eval("nil") == Error("Unbound Symbol")


def test_prelude_string():
    itp = Interpreter(prelude="(def {two} 2)")
    assert itp.eval("(* two two)") == Number(4)


def test_failing_prelude_form_raises():
    with pytest.raises(LispyLoadError, match="Unbound Symbol"):
        Interpreter(prelude="(def {a} 1) (undefined)")


def test_unparsable_prelude_raises():
    with pytest.raises(LispySyntaxError):
        Interpreter(prelude="(def {a} 1")
