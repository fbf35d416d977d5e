import pytest

from dotlisp.builtin.env_builtin import GlobalEnvironment
from dotlisp.evaluation.evaluator import Evaluator
from dotlisp.reader.parser import InPort


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return GlobalEnvironment()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against the `env` fixture; return the last value."""
    evaluator = Evaluator()

    def _run(source):
        result = None
        for expr in InPort(source).read_all():
            result = evaluator.eval(expr, env)
        return result

    return _run
