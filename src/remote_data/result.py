"""
Result: a disjoint union of an error E and a value A.

RemoteData collapses to a Result once the lifecycle no longer matters
(`RemoteData.to_result`), and a Result lifts straight back into a settled
RemoteData (`RemoteData.from_result`):

    Ok(value)   ⇄  Success(value)
    Err(error)  ⇄  Failure(error)

Unlike RemoteData there is no "in flight" state here: a Result is always
settled, so it has just two variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
R = TypeVar("R")


class Result(Generic[E, A]):
    """
    Either Ok(value: A) or Err(error: E).

        >>> Result.ok(2).map(lambda x: x + 1)
        Ok(value=3)

        >>> Result.err("boom").map(lambda x: x + 1).is_err()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> A:
        """Extract the value. Raises ValueError on Err; prefer .either() or match/case."""
        match self:
            case Ok(v):
                return v
            case Err(err):
                raise ValueError(f"Cannot unwrap an Err: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap_err(self) -> E:
        """Extract the error. Raises ValueError on Ok."""
        match self:
            case Err(err):
                return err
            case Ok(v):
                raise ValueError(f"Cannot unwrap_err an Ok: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def either(self, on_err: Callable[[E], R], on_ok: Callable[[A], R]) -> R:
        match self:
            case Ok(v):
                return on_ok(v)
            case Err(err):
                return on_err(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[A], B]) -> Result[E, B]:
        match self:
            case Ok(v):
                return Ok(mapper(v))
        return self  # type: ignore[return-value]

    def map_err(self, mapper: Callable[[E], F]) -> Result[F, A]:
        match self:
            case Err(err):
                return Err(mapper(err))
        return self  # type: ignore[return-value]

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def ok(value: A) -> Result[Any, A]:
        return Ok(value)

    @staticmethod
    def err(error: E) -> Result[E, Any]:
        return Err(error)


@dataclass(frozen=True, slots=True)
class Ok(Result[Any, A]):
    value: A


@dataclass(frozen=True, slots=True)
class Err(Result[E, Any]):
    error: E
