"""Shared pytest fixtures for shapeguard tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the ``shapeguard`` logger after each test.

    The CLI root group calls ``configure_logging``, which attaches a handler
    bound to CliRunner's stderr and stops propagation; without this, later
    tests would write to a closed stream and ``caplog`` would see nothing.
    """
    pkg = logging.getLogger("shapeguard")
    handlers = pkg.handlers[:]
    level = pkg.level
    propagate = pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate
