"""
Ports: Protocol contracts for the producers RemoteData is built from.

A producer is whatever runs the request (a query client, a mutation hook,
a cache) and exposes its state as flags. RemoteData never talks to it
beyond reading these attributes and forwarding refetch / remove.

Three shapes are accepted:

  QuerySignal     → two flags:   status + fetch_status
  FlagSignal      → booleans:    is_idle, is_fetching, is_error, is_success
  MutationSignal  → one status:  idle | loading | success | error

Each port is a runtime-checkable Protocol, so a producer satisfies it just
by having the attributes.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class QuerySignal(Protocol):
    """
    Port: a query snapshot in the two-flag encoding.

      status        ∈ {"loading", "success", "error"}
      fetch_status  ∈ {"idle", "fetching"}

    `data` may hold the last successful payload in any state.
    """

    status: Any
    fetch_status: Any
    data: Any
    error: Any


@runtime_checkable
class FlagSignal(Protocol):
    """Port: a query snapshot exposing four independent booleans."""

    is_idle: bool
    is_fetching: bool
    is_error: bool
    is_success: bool
    data: Any
    error: Any


@runtime_checkable
class MutationSignal(Protocol):
    """
    Port: a mutation snapshot.

    Mutations never refetch in the background, so one status field is
    enough and there is no stale data.
    """

    status: Any
    data: Any
    error: Any
