"""Shared pytest fixtures for ulidtools tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from tests.factories import NOV_2023_TID7, REFERENCE_LID
from ulidtools.models.ids import LID, TID7
from ulidtools.observability.logging import clear_context, configure_logging


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore default logging after a test that reconfigures it.

    CLI invocations move the root handler onto the runner's stderr; resetting
    keeps later tests from writing to a closed stream.
    """
    yield
    clear_context()
    configure_logging(force=True)


@pytest.fixture
def reference_lid() -> LID:
    return LID.parse(REFERENCE_LID)


@pytest.fixture
def nov_2023_tid7() -> TID7:
    return TID7.parse(NOV_2023_TID7)
