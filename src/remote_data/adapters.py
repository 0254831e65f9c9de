"""
Adapters: turn producer snapshots into canonical RemoteData.

Each adapter reads a producer's flags (see remote_data.ports), picks the
one variant they describe and carries over data, error and the refetch /
remove handles. No value is invented: a payload only appears on the
result if the producer reported one.

Classification tables:

  two-flag (from_query)
    fetch_status=fetching            → Pending(data)
    status=loading, fetch_status=idle → Initial
    status=success, fetch_status=idle → Success(data)
    status=error,   fetch_status=idle → Failure(error, data)

  booleans (from_flags)
    is_idle only                      → Initial
    is_fetching, not is_error         → Pending(data)
    is_error, not is_fetching         → Failure(error, data)
    is_success, not fetching/error    → Success(data)

  mutation (from_mutation)
    idle → Initial, loading → Pending(), success → Success, error → Failure

Anything outside these tables is an adapter bug: it is logged and raised
as InvalidSignalError instead of being guessed at.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Mapping, TypeVar

import structlog

from remote_data.errors import InvalidSignalError
from remote_data.ports import FlagSignal, MutationSignal, QuerySignal
from remote_data.remote import (
    Activity,
    Failure,
    Handle,
    Initial,
    LifecycleStatus,
    Pending,
    RemoteData,
    Success,
    noop,
)

log = structlog.get_logger(__name__)

TWO_FLAG = "two-flag"
BOOLEAN_FLAGS = "boolean-flags"
MUTATION = "mutation"

_EnumT = TypeVar("_EnumT", bound=Enum)


@unique
class MutationStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def _reject(encoding: str, flags: Mapping[str, Any], reason: str) -> InvalidSignalError:
    log.error("signal.rejected", encoding=encoding, reason=reason, **flags)
    return InvalidSignalError(encoding, flags, reason)


def _parse(enum_type: type[_EnumT], raw: Any, encoding: str, flags: Mapping[str, Any]) -> _EnumT:
    try:
        return enum_type(raw)
    except ValueError:
        raise _reject(encoding, flags, f"unknown {enum_type.__name__} {raw!r}") from None


def _handles(signal: Any) -> tuple[Handle, Handle]:
    refetch = getattr(signal, "refetch", None)
    remove = getattr(signal, "remove", None)
    return (
        refetch if callable(refetch) else noop,
        remove if callable(remove) else noop,
    )


def from_query(signal: QuerySignal) -> RemoteData[Any, Any]:
    """
    Adapt a two-flag query snapshot.

    A snapshot that is fetching is Pending whatever its status, keeping
    whatever data the producer still holds as the stale payload.
    """
    flags = {"status": signal.status, "fetch_status": signal.fetch_status}
    status = _parse(LifecycleStatus, signal.status, TWO_FLAG, flags)
    activity = _parse(Activity, signal.fetch_status, TWO_FLAG, flags)
    refetch, remove = _handles(signal)

    if activity is Activity.FETCHING:
        return Pending(signal.data, refetch=refetch, remove=remove)

    match status:
        case LifecycleStatus.LOADING:
            return Initial(refetch=refetch, remove=remove)
        case LifecycleStatus.SUCCESS:
            if signal.data is None:
                raise _reject(TWO_FLAG, flags, "success without data")
            return Success(signal.data, refetch=refetch, remove=remove)
        case LifecycleStatus.ERROR:
            if signal.error is None:
                raise _reject(TWO_FLAG, flags, "error without an error value")
            return Failure(signal.error, signal.data, refetch=refetch, remove=remove)
    raise TypeError("unreachable")  # pragma: no cover


def from_flags(signal: FlagSignal) -> RemoteData[Any, Any]:
    """Adapt a snapshot that reports its lifecycle as four booleans."""
    idle = bool(signal.is_idle)
    fetching = bool(signal.is_fetching)
    errored = bool(signal.is_error)
    succeeded = bool(signal.is_success)
    flags = {
        "is_idle": idle,
        "is_fetching": fetching,
        "is_error": errored,
        "is_success": succeeded,
    }
    refetch, remove = _handles(signal)

    if idle:
        if fetching or errored or succeeded:
            raise _reject(BOOLEAN_FLAGS, flags, "idle combined with another state")
        return Initial(refetch=refetch, remove=remove)
    if fetching:
        # A retry after an error must clear is_error before it can read as Pending.
        if errored:
            raise _reject(BOOLEAN_FLAGS, flags, "fetching while in error")
        return Pending(signal.data, refetch=refetch, remove=remove)
    if errored:
        if succeeded:
            raise _reject(BOOLEAN_FLAGS, flags, "error and success both set")
        if signal.error is None:
            raise _reject(BOOLEAN_FLAGS, flags, "error without an error value")
        return Failure(signal.error, signal.data, refetch=refetch, remove=remove)
    if succeeded:
        if signal.data is None:
            raise _reject(BOOLEAN_FLAGS, flags, "success without data")
        return Success(signal.data, refetch=refetch, remove=remove)
    raise _reject(BOOLEAN_FLAGS, flags, "no flag set")


def from_mutation(signal: MutationSignal) -> RemoteData[Any, Any]:
    """Adapt a mutation snapshot. A running mutation never has stale data."""
    flags = {"status": signal.status}
    status = _parse(MutationStatus, signal.status, MUTATION, flags)
    refetch, remove = _handles(signal)

    match status:
        case MutationStatus.IDLE:
            return Initial(refetch=refetch, remove=remove)
        case MutationStatus.LOADING:
            return Pending(refetch=refetch, remove=remove)
        case MutationStatus.SUCCESS:
            if signal.data is None:
                raise _reject(MUTATION, flags, "success without data")
            return Success(signal.data, refetch=refetch, remove=remove)
        case MutationStatus.ERROR:
            if signal.error is None:
                raise _reject(MUTATION, flags, "error without an error value")
            return Failure(signal.error, refetch=refetch, remove=remove)
    raise TypeError("unreachable")  # pragma: no cover


def to_remote(value: Any) -> RemoteData[Any, Any]:
    """
    Coerce anything RemoteData-shaped into a canonical RemoteData.

    Canonical values come back as they are; producer snapshots are
    recognised by their attributes (fetch_status → two-flag, is_fetching
    → booleans, a bare status → mutation).
    """
    if isinstance(value, RemoteData):
        return value
    if isinstance(value, QuerySignal):
        return from_query(value)
    if isinstance(value, FlagSignal):
        return from_flags(value)
    if isinstance(value, MutationSignal):
        return from_mutation(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as RemoteData")
