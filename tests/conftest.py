import pytest

from lispy.interpreter import Interpreter
from lispy.types.environment import Environment
from lispy.builtin.env_builtin import register


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter session with builtins only."""
    return Interpreter(prelude=None)


@pytest.fixture
def std():
    """Interpreter session with the standard prelude loaded."""
    return Interpreter(prelude="auto")
