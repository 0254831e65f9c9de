"""
Shared test fixtures and helpers for the remote_data test suite.

Provides the canonical scenario values and one instance of every state,
plus factories for fake producer snapshots.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from remote_data import RemoteData, failure, initial, pending, success

INITIAL_VALUE = 0
SUCCESS_VALUE = 1
FAILURE_VALUE = 2
PENDING_VALUE = 3
ELSE_VALUE = 4


@pytest.fixture()
def states() -> dict[str, RemoteData[int, int]]:
    """One value of every state, keyed by a readable name."""
    return {
        "initial": initial,
        "pending": pending(),
        "stale": pending(PENDING_VALUE),
        "failure": failure(FAILURE_VALUE),
        "success": success(SUCCESS_VALUE),
    }


def query_signal(
    status: str,
    fetch_status: str,
    data: Any = None,
    error: Any = None,
    **handles: Any,
) -> SimpleNamespace:
    """A fake two-flag query snapshot."""
    return SimpleNamespace(status=status, fetch_status=fetch_status, data=data, error=error, **handles)


def flag_signal(
    *,
    is_idle: bool = False,
    is_fetching: bool = False,
    is_error: bool = False,
    is_success: bool = False,
    data: Any = None,
    error: Any = None,
    **handles: Any,
) -> SimpleNamespace:
    """A fake four-boolean query snapshot."""
    return SimpleNamespace(
        is_idle=is_idle,
        is_fetching=is_fetching,
        is_error=is_error,
        is_success=is_success,
        data=data,
        error=error,
        **handles,
    )


def mutation_signal(status: str, data: Any = None, error: Any = None) -> SimpleNamespace:
    """A fake mutation snapshot."""
    return SimpleNamespace(status=status, data=data, error=error)
