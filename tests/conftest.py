"""Root pytest configuration.

Test Structure:
    tests/
    ├── echeck/              # Domain, application and CLI tests
    │   └── unit/
    ├── echeck_config/       # Settings tests
    └── shared/              # Shared fixtures and factories
"""

import pytest

from echeck_config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Give every test settings built from a clean environment."""
    for name in ("ECHECK_LOG_LEVEL", "ECHECK_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
