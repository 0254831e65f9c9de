"""
remote_data: the lifecycle of an asynchronous remote value as one closed type.

A remote value is Initial, Pending (possibly holding stale data), Success
or Failure. Pure combinators transform it, merge several into one, and
fold it into output, while keeping the last good data on screen during
refetches.

    from remote_data import combine, pipe, map_, get_or_else, success, pending

    label = pipe(
        combine({"user": success(user), "city": pending(city)}),
        map_(lambda d: f"{d['user'].name} from {d['city'].title}"),
        get_or_else(lambda: "loading…"),
    )
"""

from remote_data.adapters import from_flags, from_mutation, from_query, to_remote
from remote_data.assertions import RemoteAssertions
from remote_data.combinators import (
    chain,
    fold,
    get_or_else,
    is_failure,
    is_initial,
    is_pending,
    is_stale,
    is_success,
    map_,
    map_left,
    pipe,
    to_nullable,
    to_optional,
    to_result,
)
from remote_data.config import RemoteDataSettings
from remote_data.errors import InvalidSignalError, RemoteDataError
from remote_data.logs import configure_logging
from remote_data.merge import combine, sequence
from remote_data.remote import (
    Activity,
    Failure,
    Initial,
    LifecycleStatus,
    Pending,
    RemoteData,
    Success,
    Variant,
    failure,
    from_optional,
    from_result,
    initial,
    noop,
    pending,
    success,
)
from remote_data.render import render_remote
from remote_data.result import Err, Ok, Result

__all__ = [
    "RemoteData",
    "Initial",
    "Pending",
    "Success",
    "Failure",
    "Variant",
    "LifecycleStatus",
    "Activity",
    "initial",
    "pending",
    "success",
    "failure",
    "noop",
    "is_initial",
    "is_pending",
    "is_failure",
    "is_success",
    "is_stale",
    "from_optional",
    "from_result",
    "Result",
    "Ok",
    "Err",
    "map_",
    "map_left",
    "chain",
    "fold",
    "get_or_else",
    "to_nullable",
    "to_optional",
    "to_result",
    "pipe",
    "sequence",
    "combine",
    "render_remote",
    "from_query",
    "from_flags",
    "from_mutation",
    "to_remote",
    "RemoteDataError",
    "InvalidSignalError",
    "RemoteDataSettings",
    "configure_logging",
    "RemoteAssertions",
]

__version__ = "0.1.0"
