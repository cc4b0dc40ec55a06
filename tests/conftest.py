from collections.abc import Callable

import pytest
from hypothesis import HealthCheck, settings

from config import FeatureOptions
from file_paths import PathMapper

FLAG_ENV = "INCLUDE_PROJECT_KEY_IN_GENERATED_FILE_PATH"

# Mapper fixtures are stateless, so reusing them across generated examples is safe.
settings.register_profile(
    "projection-paths",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("projection-paths")


@pytest.fixture(autouse=True)
def _isolate_flag_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a host-level flag from leaking into tests."""
    monkeypatch.delenv(FLAG_ENV, raising=False)


@pytest.fixture
def make_mapper() -> Callable[[bool], PathMapper]:
    def _make(include_project_key: bool) -> PathMapper:
        return PathMapper(FeatureOptions(INCLUDE_PROJECT_KEY_IN_GENERATED_FILE_PATH=include_project_key))

    return _make


@pytest.fixture
def scoped_mapper(make_mapper: Callable[[bool], PathMapper]) -> PathMapper:
    return make_mapper(True)


@pytest.fixture
def unscoped_mapper(make_mapper: Callable[[bool], PathMapper]) -> PathMapper:
    return make_mapper(False)
