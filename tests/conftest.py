"""Pytest configuration and shared fixtures for content_type_hub.

.cth_env (if present at the project root) is loaded FIRST with override=True so
that settings-driven tests see a predictable environment.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_CTH_ENV_FILE = Path(__file__).parent.parent / ".cth_env"
if _CTH_ENV_FILE.exists():
    load_dotenv(_CTH_ENV_FILE, override=True)

from typing import Any, Dict, Generator

import pytest

from content_type_hub.config.settings import get_settings
from content_type_hub.domain.content_types import RegistrationGateway
from content_type_hub.domain.content_types import columns as columns_module
from content_type_hub.host import InMemoryHost


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around every test so monkeypatched env applies."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def isolated_renderers() -> Generator[None, None, None]:
    """Restore the named renderer table after each test."""
    saved = dict(columns_module._RENDERERS)
    yield
    columns_module._RENDERERS.clear()
    columns_module._RENDERERS.update(saved)


@pytest.fixture
def host() -> InMemoryHost:
    """Host with the standard baseline supports for ``post``."""
    return InMemoryHost()


@pytest.fixture
def minimal_host() -> InMemoryHost:
    """Host whose baseline type only supports title and editor."""
    return InMemoryHost(baseline_supports=["title", "editor"])


@pytest.fixture
def gateway(host: InMemoryHost) -> RegistrationGateway:
    return RegistrationGateway(host)


@pytest.fixture
def book_config() -> Dict[str, Any]:
    return {
        "pluralName": "Books",
        "singularName": "Book",
        "args": {
            "public": True,
            "hierarchical": False,
            "has_archive": True,
        },
    }
