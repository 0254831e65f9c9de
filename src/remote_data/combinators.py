"""
Pipeable combinators: the RemoteData methods as one-argument functions.

Every function here returns a function of a single RemoteData, so stages
line up in `pipe`:

    user_label = pipe(
        remote_user,
        map_(lambda user: f"{user.name} ({user.age})"),
        get_or_else(lambda: "no user yet"),
    )

Names that would shadow a builtin carry a trailing underscore. Producer
snapshots are accepted wherever a RemoteData is (see `to_remote`), so the
is_* predicates classify a value the same way whichever encoding it
comes in.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Optional, TypeVar

from remote_data.adapters import to_remote
from remote_data.remote import RemoteData
from remote_data.result import Result

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
R = TypeVar("R")


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """
    Thread `value` through `fns` left to right.

        pipe(x, f, g, h) == h(g(f(x)))
        pipe(x) == x
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)


def map_(mapper: Callable[[A], B]) -> Callable[[RemoteData[E, A]], RemoteData[E, B]]:
    return lambda remote: to_remote(remote).map(mapper)


def map_left(mapper: Callable[[E], F]) -> Callable[[RemoteData[E, A]], RemoteData[F, A]]:
    return lambda remote: to_remote(remote).map_left(mapper)


def chain(
    mapper: Callable[[A], RemoteData[E, B]],
) -> Callable[[RemoteData[E, A]], RemoteData[E, B]]:
    return lambda remote: to_remote(remote).chain(mapper)


def fold(
    on_initial: Callable[[], R],
    on_pending: Callable[[Optional[A]], R],
    on_failure: Callable[[E], R],
    on_success: Callable[[A], R],
) -> Callable[[RemoteData[E, A]], R]:
    return lambda remote: to_remote(remote).fold(on_initial, on_pending, on_failure, on_success)


def get_or_else(on_else: Callable[[], A]) -> Callable[[RemoteData[Any, A]], A]:
    return lambda remote: to_remote(remote).get_or_else(on_else)


def to_nullable(remote: RemoteData[Any, A]) -> Optional[A]:
    return to_remote(remote).to_nullable()


def to_optional(remote: RemoteData[Any, A]) -> Optional[A]:
    return to_remote(remote).to_optional()


def to_result(
    on_initial: Callable[[], E],
    on_pending: Callable[[], E],
) -> Callable[[RemoteData[E, A]], Result[E, A]]:
    return lambda remote: to_remote(remote).to_result(on_initial, on_pending)


# ──────────────────────── Predicates ────────────────────────


def is_initial(remote: Any) -> bool:
    return to_remote(remote).is_initial()


def is_pending(remote: Any) -> bool:
    return to_remote(remote).is_pending()


def is_failure(remote: Any) -> bool:
    return to_remote(remote).is_failure()


def is_success(remote: Any) -> bool:
    return to_remote(remote).is_success()


def is_stale(remote: Any) -> bool:
    return to_remote(remote).is_stale()
