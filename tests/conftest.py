import pytest

from minilisp.interpreter import Interpreter, make_global_env
from minilisp.runtime_context import set_output


@pytest.fixture
def env():
    """Fresh global environment with every primitive loaded."""
    return make_global_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _reset_output():
    yield
    set_output(None)
