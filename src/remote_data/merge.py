"""
Merge engine: fold several RemoteData into one.

The aggregate's variant is decided by a fixed precedence, checked top to
bottom against the members:

    1. every member is Success             → Success(all payloads)
    2. any member is Failure               → Failure(first error, in order)
    3. every member has a payload          → Pending(all payloads)
       (Success or stale Pending)
    4. any member is Pending               → Pending()
    5. otherwise (every member Initial)    → Initial

Rule 1 outranks rule 2, and rule 2 outranks everything else, so a mix of
Success and Failure is always a Failure.

Only the first failure's error is kept; later ones are not reported.

The aggregate's refetch / remove fan out to every member, whichever rule
produced it.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from remote_data.adapters import to_remote
from remote_data.remote import (
    Failure,
    Handle,
    Initial,
    Pending,
    RemoteData,
    Success,
)


def _fan_out(handles: list[Handle]) -> Handle:
    def delegate() -> None:
        for handle in handles:
            handle()

    return delegate


def _merge(
    members: list[RemoteData[Any, Any]],
    shape: Callable[[list[Any]], Any],
) -> RemoteData[Any, Any]:
    refetch = _fan_out([m.refetch for m in members])
    remove = _fan_out([m.remove for m in members])

    if all(m.is_success() for m in members):
        return Success(shape([m.data for m in members]), refetch=refetch, remove=remove)

    first_failure = next((m for m in members if m.is_failure()), None)
    if first_failure is not None:
        return Failure(first_failure.error, refetch=refetch, remove=remove)

    if all(m.is_success() or m.is_stale() for m in members):
        return Pending(shape([m.data for m in members]), refetch=refetch, remove=remove)

    if any(m.is_pending() for m in members):
        return Pending(refetch=refetch, remove=remove)

    return Initial(refetch=refetch, remove=remove)


def sequence(*values: Any) -> RemoteData[Any, tuple[Any, ...]]:
    """
    Merge positional RemoteData into one RemoteData of a tuple.

        sequence(success(1), success(2))   # → Success((1, 2))
        sequence(success(1), pending(3))   # → Pending((1, 3))
        sequence(success(1), pending())    # → Pending()
        sequence(success(1), failure("x")) # → Failure("x")

    Producer snapshots are accepted in place of RemoteData and adapted
    with `to_remote` first.
    """
    members = [to_remote(v) for v in values]
    return _merge(members, tuple)


def combine(struct: Mapping[str, Any]) -> RemoteData[Any, dict[str, Any]]:
    """
    Merge keyed RemoteData into one RemoteData of a dict.

    Same precedence as `sequence` over the mapping's values in iteration
    order; the payload keeps the mapping's keys.

        combine({"user": success(user), "city": pending(city)})
        # → Pending({"user": user, "city": city})
    """
    keys = list(struct)
    members = [to_remote(struct[k]) for k in keys]
    return _merge(members, lambda payloads: dict(zip(keys, payloads)))
