"""Pytest configuration and shared fixtures for klaw-assert tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import structlog
from klaw_assert import DEFAULT, set_default_asserter

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_default_asserter() -> Iterator[None]:
    """Put the process default back to DEFAULT after each test."""
    yield
    set_default_asserter(DEFAULT)


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Undo configure_logging() and capture_logs() so other tests see defaults."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
