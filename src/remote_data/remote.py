"""
RemoteData: the lifecycle of an asynchronous remote value.

A RemoteData[E, A] is exactly one of four variants:

    ┌─────────┐  fetch   ┌─────────┐  done   ┌─────────┐
    │ Initial │─────────→│ Pending │────────→│ Success │──┐
    └─────────┘          └─────────┘         └─────────┘  │ refetch
                           ↑   │  error      ┌─────────┐  │ (stale data kept)
                           │   └────────────→│ Failure │  │
                           └─────────────────┴─────────┴──┘

Every variant also reads as a two-flag lifecycle signal
(status ∈ {loading, success, error}, fetch_status ∈ {idle, fetching}):

    Initial = (loading, idle)
    Pending = (*, fetching)
    Success = (success, idle)
    Failure = (error, idle)

A Pending that still carries the last successful payload is "stale":
combinators treat it like a Success, so old data keeps flowing while a
refetch is in flight.

Design choices:
  - frozen, slotted dataclasses; combinators always build new instances
  - None is the absent payload, so Success(None) / Failure(None) are rejected
  - map keeps the input as it is when the mapper returns None
  - refetch / remove handles are ignored by equality and repr
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar

from remote_data.result import Err, Ok, Result

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
R = TypeVar("R")

Handle = Callable[[], Any]


def noop() -> None:
    """Default refetch / remove handle. Shared by every value that has none."""
    return None


@unique
class LifecycleStatus(Enum):
    """First flag of the two-flag encoding: where the request lifecycle is."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@unique
class Activity(Enum):
    """Second flag of the two-flag encoding: whether a request is in flight."""

    IDLE = "idle"
    FETCHING = "fetching"


@unique
class Variant(Enum):
    INITIAL = "initial"
    PENDING = "pending"
    FAILURE = "failure"
    SUCCESS = "success"


class RemoteData(Generic[E, A]):
    """
    Four-state remote value with pure, total combinators.

    Branching discipline shared by every payload combinator:
      1. Success               → use the payload
      2. stale Pending (data)  → use the payload
      3. anything else         → left untouched

    Usage:
        >>> RemoteData.success(2).map(lambda x: x * 10)
        Success(data=20)

        >>> RemoteData.pending(3).get_or_else(lambda: 0)
        3

        >>> RemoteData.initial().map(lambda x: x * 10).is_initial()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_initial(self) -> bool:
        return isinstance(self, Initial)

    def is_pending(self) -> bool:
        return isinstance(self, Pending)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_stale(self) -> bool:
        """True for a Pending that still carries a previous payload."""
        match self:
            case Pending(data=v) if v is not None:
                return True
        return False

    # ──────────────────────── Core Transformations ────────────────────────

    def map(self, mapper: Callable[[A], B]) -> RemoteData[E, B]:
        """
        Transform the payload of a Success or stale Pending.

        Initial, empty Pending and Failure come back unchanged; `mapper`
        is never called without a payload. A `mapper` that returns None
        produces no payload, so the value also comes back unchanged, for
        Success and stale Pending alike.

            RemoteData.success(5).map(lambda x: x * 2)   # → Success(10)
            RemoteData.pending(5).map(lambda x: x * 2)   # → Pending(10)
            RemoteData.pending().map(lambda x: x * 2)    # → Pending()
            RemoteData.success(5).map(lambda x: None)    # → Success(5)
        """
        match self:
            case Success(data=v):
                mapped = mapper(v)
                if mapped is not None:
                    return Success(mapped, refetch=self.refetch, remove=self.remove)
            case Pending(data=v) if v is not None:
                mapped = mapper(v)
                if mapped is not None:
                    return Pending(mapped, refetch=self.refetch, remove=self.remove)
        return self  # type: ignore[return-value]

    def map_left(self, mapper: Callable[[E], F]) -> RemoteData[F, A]:
        """
        Transform the error of a Failure. Every other variant passes through.

            RemoteData.failure("timeout").map_left(str.upper)  # → Failure("TIMEOUT")
        """
        match self:
            case Failure(error=err, data=stale):
                return Failure(mapper(err), stale, refetch=self.refetch, remove=self.remove)
        return self  # type: ignore[return-value]

    def chain(self, mapper: Callable[[A], RemoteData[E, B]]) -> RemoteData[E, B]:
        """
        Chain a RemoteData-returning function off the available payload.

        Success and stale Pending are replaced by `mapper(payload)`; every
        other variant is returned as is, retyped to the new payload.

            def load_city(user) -> RemoteData[Error, City]: ...

            remote_user.chain(load_city)
        """
        match self:
            case Success(data=v):
                return mapper(v)
            case Pending(data=v) if v is not None:
                return mapper(v)
        return self  # type: ignore[return-value]

    def fold(
        self,
        on_initial: Callable[[], R],
        on_pending: Callable[[Optional[A]], R],
        on_failure: Callable[[E], R],
        on_success: Callable[[A], R],
    ) -> R:
        """
        Total case analysis, the fundamental destructor.

        Variants are checked in the order Initial → Failure → Success →
        Pending; `on_pending` receives the stale payload or None.

            remote.fold(
                on_initial=lambda: "nothing fetched yet",
                on_pending=lambda stale: "loading" if stale is None else f"refreshing {stale}",
                on_failure=lambda err: f"error: {err}",
                on_success=lambda user: f"hello {user.name}",
            )
        """
        match self:
            case Initial():
                return on_initial()
            case Failure(error=err):
                return on_failure(err)
            case Success(data=v):
                return on_success(v)
            case Pending(data=stale):
                return on_pending(stale)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Extraction ────────────────────────

    def get_or_else(self, on_else: Callable[[], A]) -> A:
        """Payload of a Success or stale Pending, otherwise `on_else()`."""
        match self:
            case Success(data=v):
                return v
            case Pending(data=v) if v is not None:
                return v
        return on_else()

    def to_nullable(self) -> Optional[A]:
        """Payload of a Success or stale Pending, otherwise None."""
        match self:
            case Success(data=v):
                return v
            case Pending(data=v) if v is not None:
                return v
        return None

    def to_optional(self) -> Optional[A]:
        """
        Optional view of the available payload.

        Python's Optional is the nullable type, so this is `to_nullable`
        under the name callers reach for when converting to an option.
        """
        return self.to_nullable()

    def to_result(
        self,
        on_initial: Callable[[], E],
        on_pending: Callable[[], E],
    ) -> Result[E, A]:
        """
        Convert to a Result, naming the error for states without one.

            Success / stale Pending → Ok(payload)
            Initial                 → Err(on_initial())
            empty Pending           → Err(on_pending())
            Failure                 → Err(error)
        """
        match self:
            case Initial():
                return Err(on_initial())
            case Pending(data=v) if v is not None:
                return Ok(v)
            case Pending():
                return Err(on_pending())
            case Success(data=v):
                return Ok(v)
            case Failure(error=err):
                return Err(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def initial() -> RemoteData[Any, Any]:
        """The shared empty state: nothing requested yet."""
        return INITIAL

    @staticmethod
    def pending(value: Optional[A] = None) -> RemoteData[Any, A]:
        """A request in flight, optionally still holding the previous payload."""
        return Pending(value)

    @staticmethod
    def success(value: A) -> RemoteData[Any, A]:
        return Success(value)

    @staticmethod
    def failure(error: E) -> RemoteData[E, Any]:
        return Failure(error)

    @staticmethod
    def from_optional(value: Optional[A], on_absent: Callable[[], E]) -> RemoteData[E, A]:
        """
        Success for a present value, Failure(on_absent()) for None.

            RemoteData.from_optional(cache.get(key), lambda: KeyError(key))
        """
        if value is None:
            return Failure(on_absent())
        return Success(value)

    @staticmethod
    def from_result(result: Result[E, A]) -> RemoteData[E, A]:
        """Ok → Success, Err → Failure."""
        match result:
            case Ok(v):
                return Success(v)
            case Err(err):
                return Failure(err)
        raise TypeError(f"Expected a Result, got {type(result).__name__}")


@dataclass(frozen=True, slots=True)
class Initial(RemoteData[Any, Any]):
    """No request has started."""

    refetch: Handle = field(default=noop, compare=False, repr=False)
    remove: Handle = field(default=noop, compare=False, repr=False)

    variant: ClassVar[Variant] = Variant.INITIAL
    status: ClassVar[LifecycleStatus] = LifecycleStatus.LOADING
    fetch_status: ClassVar[Activity] = Activity.IDLE
    data: ClassVar[None] = None
    error: ClassVar[None] = None


@dataclass(frozen=True, slots=True)
class Pending(RemoteData[Any, A]):
    """A request in flight. `data` is the stale payload from a previous Success, if any."""

    data: Optional[A] = None
    refetch: Handle = field(default=noop, compare=False, repr=False)
    remove: Handle = field(default=noop, compare=False, repr=False)

    variant: ClassVar[Variant] = Variant.PENDING
    status: ClassVar[LifecycleStatus] = LifecycleStatus.LOADING
    fetch_status: ClassVar[Activity] = Activity.FETCHING
    error: ClassVar[None] = None


@dataclass(frozen=True, slots=True)
class Success(RemoteData[Any, A]):
    """The request completed with a payload."""

    data: A
    refetch: Handle = field(default=noop, compare=False, repr=False)
    remove: Handle = field(default=noop, compare=False, repr=False)

    variant: ClassVar[Variant] = Variant.SUCCESS
    status: ClassVar[LifecycleStatus] = LifecycleStatus.SUCCESS
    fetch_status: ClassVar[Activity] = Activity.IDLE
    error: ClassVar[None] = None

    def __post_init__(self) -> None:
        if self.data is None:
            raise TypeError("Success data must not be None")


@dataclass(frozen=True, slots=True)
class Failure(RemoteData[E, A]):
    """The request completed with an error. `data` may hold a stale payload."""

    error: E
    data: Optional[A] = None
    refetch: Handle = field(default=noop, compare=False, repr=False)
    remove: Handle = field(default=noop, compare=False, repr=False)

    variant: ClassVar[Variant] = Variant.FAILURE
    status: ClassVar[LifecycleStatus] = LifecycleStatus.ERROR
    fetch_status: ClassVar[Activity] = Activity.IDLE

    def __post_init__(self) -> None:
        if self.error is None:
            raise TypeError("Failure error must not be None")


INITIAL: RemoteData[Any, Any] = Initial()


# ──────────────────────── Module-level constructors ────────────────────────

initial = INITIAL


def pending(value: Optional[A] = None) -> RemoteData[Any, A]:
    return Pending(value)


def success(value: A) -> RemoteData[Any, A]:
    return Success(value)


def failure(error: E) -> RemoteData[E, Any]:
    return Failure(error)


def from_optional(value: Optional[A], on_absent: Callable[[], E]) -> RemoteData[E, A]:
    return RemoteData.from_optional(value, on_absent)


def from_result(result: Result[E, A]) -> RemoteData[E, A]:
    return RemoteData.from_result(result)
