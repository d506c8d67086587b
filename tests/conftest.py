import pytest

from typesafe import set_validation


@pytest.fixture(autouse=True, scope="session")
def validation_on():
    # Session scope keeps Hypothesis tests free of function-scoped fixtures
    previous = set_validation(True)
    yield
    set_validation(previous)


@pytest.fixture
def validation_off():
    previous = set_validation(False)
    yield
    set_validation(previous)
