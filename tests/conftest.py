"""Shared test fixtures for the notionkit test suite."""

from __future__ import annotations

import pytest

from notionkit.config import NotionKitConfig


@pytest.fixture
def config() -> NotionKitConfig:
    """Default test configuration with a dummy token."""
    return NotionKitConfig(token="secret_test_token_1234")
