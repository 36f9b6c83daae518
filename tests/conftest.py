"""Shared test fixtures for the notionsync test suite."""

from __future__ import annotations

import pytest

from notionsync.config import ConverterConfig
from notionsync.converter.md_to_notion import MarkdownToNotionConverter


@pytest.fixture
def config() -> ConverterConfig:
    """Default converter configuration."""
    return ConverterConfig()


@pytest.fixture
def converter(config: ConverterConfig) -> MarkdownToNotionConverter:
    """Markdown-to-Notion converter using the default test config."""
    return MarkdownToNotionConverter(config)
