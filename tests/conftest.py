# tests/conftest.py

"""Shared pytest fixtures for all dashboard tests."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def block_http_sessions() -> Generator[MagicMock, None, None]:
    """Replace curl_cffi sessions so no test reaches the real catalog."""
    with patch(
        "product_dashboard.services.catalog_client.curl_requests.Session"
    ) as session_cls:
        yield session_cls
