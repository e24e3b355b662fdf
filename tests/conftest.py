import pathlib
import sys

import pytest
from hypothesis import HealthCheck, settings

p = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.insert(0, p) if p not in sys.path else None

from aufin.config import get_settings  # noqa: E402

# The settings reset below runs once per test, not per generated example;
# examples never touch the environment.
settings.register_profile("aufin", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("aufin")

_ENV_VARS = ("AUFIN_FINANCIAL_YEAR", "AUFIN_DEFAULT_FREQUENCY", "AUFIN_LOG_LEVEL", "AUFIN_STRICT_TABLES")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
