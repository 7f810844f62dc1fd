import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from news_registry import RegistryConfig, SourceRecord, SourceRegistry, reset_config, reset_default_registry  # noqa: E402


@pytest.fixture
def registry() -> SourceRegistry:
    return SourceRegistry(RegistryConfig())


@pytest.fixture
def empty_registry() -> SourceRegistry:
    return SourceRegistry(RegistryConfig(sources=()))


@pytest.fixture
def sample_sources() -> List[SourceRecord]:
    return [
        SourceRecord("Alpha Daily", "alpha.com", "AA", "mainstream"),
        SourceRecord("Beta Ledger", "beta.org", "BB", "financial"),
        SourceRecord("Alpha Business", "biz.alpha.com", "AA", "financial"),
    ]


@pytest.fixture
def registry_factory():
    def _factory(sources, **overrides) -> SourceRegistry:
        return SourceRegistry(RegistryConfig(sources=tuple(sources), **overrides))

    return _factory


@pytest.fixture(autouse=True)
def clean_globals():
    reset_config()
    reset_default_registry()
    yield
    reset_config()
    reset_default_registry()
