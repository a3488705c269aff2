"""Shared pytest fixtures for Terminal Quest tests."""
from __future__ import annotations

import pytest

from helpers.builders import make_terminal
from termquest.core.scheduler import ManualScheduler
from termquest.services.terminal import Terminal


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def terminal(scheduler: ManualScheduler) -> Terminal:
    return make_terminal(scheduler)
