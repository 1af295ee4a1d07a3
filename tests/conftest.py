import pytest

from pretex.adapters.latex import LaTeXRenderer
from pretex.core.config import PretexConfig


@pytest.fixture
def config() -> PretexConfig:
    return PretexConfig()


@pytest.fixture
def renderer(config: PretexConfig) -> LaTeXRenderer:
    return LaTeXRenderer(config=config)
