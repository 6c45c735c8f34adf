"""Shared fixtures."""

from collections.abc import Iterator

import pytest

from chuk_mcp_lmt.registry import LINKS, AliasRegistry


@pytest.fixture
def registry() -> AliasRegistry:
    """A private alias registry."""
    return AliasRegistry()


@pytest.fixture(autouse=True)
def clean_links() -> Iterator[None]:
    """Keep the process-wide registry empty between tests."""
    LINKS.clear()
    yield
    LINKS.clear()
