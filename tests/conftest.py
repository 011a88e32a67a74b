from __future__ import annotations

from pathlib import Path

import pytest

from shelfsite.storage.memory import InMemoryStorageProvider
from tests.helpers.sites import make_memory_site


@pytest.fixture
def memory_storage() -> InMemoryStorageProvider:
    return InMemoryStorageProvider()


@pytest.fixture
def memory_site(memory_storage: InMemoryStorageProvider) -> Path:
    """A ready site (templates, config and books) inside ``memory_storage``."""
    return make_memory_site(memory_storage)


@pytest.fixture
def settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings document at a temporary file and return its path."""
    settings_path = tmp_path / "config" / "settings.json"
    monkeypatch.setenv("SHELFSITE_SETTINGS_PATH", str(settings_path))
    monkeypatch.delenv("SHELFSITE_LOG_LEVEL", raising=False)
    return settings_path
