"""
Render boundary: pick one of five outputs for a RemoteData.

The UI layer (templates, widgets, terminal output) hands over a value and
one output per state; exactly one is produced. Detection is a single
`fold`, so this module knows nothing about the variants itself.

    render_remote(
        remote_users,
        success=lambda users: table(users),
        initial="Press refresh",
        pending=spinner(),
        refetching=lambda users: table(users, dimmed=True),
        failure=lambda err: error_banner(err),
    )
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from remote_data.adapters import to_remote

E = TypeVar("E")
A = TypeVar("A")
R = TypeVar("R")


def render_remote(
    remote: Any,
    success: Callable[[A], R],
    *,
    initial: Optional[R] = None,
    pending: Optional[R] = None,
    refetching: Optional[Callable[[A], R]] = None,
    failure: Optional[Callable[[E], R]] = None,
) -> Optional[R]:
    """
    Render `remote` with the output matching its state.

    `initial` and `pending` are constants; `refetching` (stale Pending),
    `failure` and `success` receive the payload or error. Without a
    `refetching` renderer a stale Pending renders as `pending`; without a
    `failure` renderer a Failure renders as None.
    """
    on_refetching = refetching if refetching is not None else (lambda _stale: pending)
    on_failure = failure if failure is not None else (lambda _error: None)

    return to_remote(remote).fold(
        lambda: initial,
        lambda stale: pending if stale is None else on_refetching(stale),
        on_failure,
        success,
    )
