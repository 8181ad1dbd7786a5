"""Pytest configuration and fixtures."""

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

TEST_ENV_VARS = {
    "BOT_TOKEN": "test-token-12345",
    "LOG_LEVEL": "DEBUG",
    "DROP_PENDING_UPDATES": "false",
}

# Module-level settings are built when test modules import the package,
# which happens at collection time, before any fixture runs.
for _name, _value in TEST_ENV_VARS.items():
    os.environ.setdefault(_name, _value)


@pytest.fixture(autouse=True)
def mock_env_vars():
    """Set up test environment variables."""
    with patch.dict(os.environ, TEST_ENV_VARS, clear=False):
        yield


@pytest.fixture
def valid_address():
    """A well-formed 44 character Solana address."""
    return "4Nd1mYWsT5bEJ7rNq8VxKcZp2aGhL3uRf9DkMtQwXyEo"


@pytest.fixture
def mock_update():
    """Create mock Telegram Update object."""
    update = MagicMock()
    update.update_id = 42
    update.message = MagicMock()
    update.message.text = "/help"
    update.message.reply_text = AsyncMock()
    update.effective_message = update.message
    update.effective_chat = MagicMock()
    update.effective_chat.id = 12345
    return update


@pytest.fixture
def mock_context():
    """Create mock Telegram Context object."""
    context = MagicMock()
    context.args = []
    context.error = None
    return context
