"""
Exceptions for construction-time misuse.

Combinators never raise: an application error travels as the payload of a
Failure. The exceptions here only report bugs at the producer boundary,
e.g. an adapter handed a flag combination that matches no variant.
"""

from __future__ import annotations

from typing import Any, Mapping


class RemoteDataError(Exception):
    """Root of every exception raised by remote_data."""


class InvalidSignalError(RemoteDataError, ValueError):
    """
    A producer signal whose flags match none of the four variants.

        >>> err = InvalidSignalError("two-flag", {"status": "paused", "fetch_status": "idle"})
        >>> err.encoding
        'two-flag'
    """

    def __init__(self, encoding: str, flags: Mapping[str, Any], reason: str = "") -> None:
        self.encoding = encoding
        self.flags = dict(flags)
        self.reason = reason
        rendered = ", ".join(f"{k}={v!r}" for k, v in self.flags.items())
        message = f"Unrecognised {encoding} signal ({rendered})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
