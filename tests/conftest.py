import pytest

from skim.interpreter import Interpreter
from skim.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty global environment."""
    return Environment()


@pytest.fixture
def interp(env):
    """Interpreter evaluating against the `env` fixture."""
    return Interpreter(env)


@pytest.fixture
def run(interp):
    """Evaluate source and return the rendering of the last value."""
    def _run(source: str) -> str:
        return str(interp.eval(source))
    return _run
