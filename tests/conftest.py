"""Pytest configuration and fixtures.

Provides environment isolation, a scripted fake Bot API behind
``httpx.MockTransport``, marker-based skipping of live API tests, and quiet
third-party loggers. Environment fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from botwire import Bot
from tests.helpers import TOKEN, FakeBotApi

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def token() -> str:
    return TOKEN


@pytest.fixture
def fake_api() -> FakeBotApi:
    return FakeBotApi()


@pytest.fixture
def bot(fake_api: FakeBotApi) -> Bot:
    """A Bot wired to ``fake_api``."""
    return Bot.with_client(TOKEN, fake_api.client())


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_bot_env(request, monkeypatch):
    """Clear BOTWIRE_* variables so tests never see a developer's real token.

    Opt-out: @pytest.mark.api
    """
    if "api" in request.node.keywords:
        return
    for key in list(os.environ.keys()):
        if key.startswith("BOTWIRE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================

API_TESTS_REASON = "API tests require ENABLE_API_TESTS=1"


def _api_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_API_TESTS"))


def pytest_collection_modifyitems(items):
    """Automatically skip API tests when not explicitly enabled."""
    if _api_tests_enabled():
        return
    skip_api = pytest.mark.skip(reason=API_TESTS_REASON)
    for item in items:
        if "api" in item.keywords:
            item.add_marker(skip_api)


@pytest.fixture
def live_token():
    """Return BOTWIRE_TOKEN or skip the test if unavailable."""
    value = os.getenv("BOTWIRE_TOKEN")
    if not value:
        pytest.skip("BOTWIRE_TOKEN not set")
    return value
