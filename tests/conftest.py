import pytest

from jtree.jinja import reset_environment


@pytest.fixture(autouse=True)
def fresh_environment():
    """Each test builds its own shared jinja environment."""
    reset_environment()
    yield
    reset_environment()
