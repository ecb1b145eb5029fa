import pytest

from backprop import use_tape


@pytest.fixture(autouse=True)
def tape():
    """Each test records its graph on its own tape."""
    with use_tape() as t:
        yield t
