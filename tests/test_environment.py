from lispy.types import Environment, Error, LiteralList, Number, Symbol, UNBOUND_SYMBOL


def test_lookup_walks_the_parent_chain():
    root = Environment()
    child = Environment(root)
    root.put(Symbol("x"), Number(1))
    assert child.lookup(Symbol("x")) == Number(1)


def test_unbound_symbol_is_an_error_value():
    env = Environment(Environment())
    assert env.lookup(Symbol("nope")) == Error(UNBOUND_SYMBOL)
    assert str(env.lookup("nope")) == "Unbound Symbol"


def test_lookup_returns_a_copy():
    env = Environment()
    env.put("xs", LiteralList([Number(1)]))
    got = env.lookup("xs")
    got.cells.append(Number(2))
    assert env.lookup("xs") == LiteralList([Number(1)])


def test_put_stores_a_copy():
    env = Environment()
    xs = LiteralList([Number(1)])
    env.put("xs", xs)
    xs.cells.append(Number(2))
    assert env.lookup("xs") == LiteralList([Number(1)])


def test_put_overwrites_in_place_and_keeps_order():
    env = Environment()
    env.put("a", Number(1))
    env.put("b", Number(2))
    env.put("a", Number(3))
    assert list(env.vars) == ["a", "b"]
    assert env.lookup("a") == Number(3)


def test_put_only_touches_the_current_frame():
    root = Environment()
    child = Environment(root)
    root.put("x", Number(1))
    child.put("x", Number(2))
    assert root.lookup("x") == Number(1)
    assert child.lookup("x") == Number(2)
    assert "x" in child


def test_define_binds_in_the_root():
    root = Environment()
    leaf = Environment(Environment(root))
    leaf.define(Symbol("g"), Number(9))
    assert "g" in root
    assert "g" not in leaf
    assert leaf.root is root


def test_copy_shares_parent_and_copies_values():
    root = Environment()
    env = Environment(root)
    env.put("xs", LiteralList([Number(1)]))
    clone = env.copy()
    assert clone.parent is root
    clone.vars["xs"].cells.append(Number(2))
    clone.put("y", Number(0))
    assert env.lookup("xs") == LiteralList([Number(1)])
    assert "y" not in env


def test_str_and_repr():
    root = Environment()
    root.put("x", Number(1))
    child = Environment(root)
    child.put("y", LiteralList([Number(2)]))
    assert str(root) == "{x: 1}"
    assert str(child) == "{y: {2}} -> ..."
    assert repr(child) == "<Environment chain: {y: {2}} -> {x: 1}>"
