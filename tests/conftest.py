# tests/conftest.py
import pytest

from english_inflect.core.engine import Engine
from english_inflect.shared.container import container


@pytest.fixture(scope="function")
def engine():
    """A fresh engine with every classical flag off and no overrides."""
    return Engine()


@pytest.fixture(autouse=True)
def _fresh_default_engine():
    """
    Give every test its own process-wide default engine, so module-level
    overrides and flag changes never leak between tests.
    """
    container.default_engine.reset()
    yield
    container.default_engine.reset_override()
    container.default_engine.reset()
