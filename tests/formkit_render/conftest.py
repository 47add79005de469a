import pytest

from formkit.render import Element, RenderEngine, create_registry


@pytest.fixture(scope="function")
def registry():
    return create_registry()


@pytest.fixture(scope="function")
def engine(registry):
    return RenderEngine(registry)


@pytest.fixture
def select_element():
    return Element(
        id="f1",
        type="select_element",
        name="favorite",
        label="Pick one",
        select_options=[
            {"order": 1, "value": "a", "display": "A"},
            {"order": 2, "value": "b", "display": "B"},
        ],
    )
