"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (fakes, mocked HTTP)
    ├── integration/           # Tests against a real SQLite cache file
    └── shared/                # Builders, fakes and stream helpers
"""

import pytest

from skycast.config import clear_settings_cache


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep tests independent of the developer's environment and .env files."""
    for name in ("SKYCAST_ENV_FILE", "SKYCAST_DATABASE_URL", "SKYCAST_WEATHER_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
