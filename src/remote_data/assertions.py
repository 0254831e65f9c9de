"""
Test assertions for RemoteData values.

Expressive assert helpers that name the expected and actual state in the
failure message:

    from remote_data import RemoteAssertions

    def test_profile_loads():
        remote = load_profile(fake_client)
        profile = RemoteAssertions.assert_success(remote)
        assert profile.name == "Alice"

    def test_profile_refetch_keeps_old_data():
        RemoteAssertions.assert_stale(refetching_profile, expected=old_profile)
"""

from __future__ import annotations

from typing import Any, TypeVar

from remote_data.remote import RemoteData, Variant

A = TypeVar("A")

_MISSING: Any = object()


def _context(message: str) -> str:
    return f": {message}" if message else ""


class RemoteAssertions:
    """Expressive test assertions for RemoteData values."""

    @staticmethod
    def assert_initial(remote: RemoteData[Any, Any], message: str = "") -> None:
        assert remote.is_initial(), (
            f"Expected Initial but got {remote!r}{_context(message)}"
        )

    @staticmethod
    def assert_pending(remote: RemoteData[Any, Any], message: str = "") -> None:
        """Assert an empty Pending: in flight and nothing to show yet."""
        assert remote.is_pending(), (
            f"Expected Pending but got {remote!r}{_context(message)}"
        )
        assert remote.data is None, (
            f"Expected empty Pending but it carries {remote.data!r}{_context(message)}"
        )

    @staticmethod
    def assert_stale(
        remote: RemoteData[Any, A],
        expected: Any = _MISSING,
        message: str = "",
    ) -> A:
        """
        Assert a Pending that still carries a payload and return it.

            data = RemoteAssertions.assert_stale(remote, expected=[1, 2])
        """
        assert remote.is_stale(), (
            f"Expected stale Pending but got {remote!r}{_context(message)}"
        )
        if expected is not _MISSING:
            assert remote.data == expected, (
                f"Expected stale payload {expected!r} but got {remote.data!r}{_context(message)}"
            )
        return remote.data

    @staticmethod
    def assert_success(
        remote: RemoteData[Any, A],
        expected: Any = _MISSING,
        message: str = "",
    ) -> A:
        """Assert a Success, optionally with a specific payload, and return the payload."""
        assert remote.is_success(), (
            f"Expected Success but got {remote!r}{_context(message)}"
        )
        if expected is not _MISSING:
            assert remote.data == expected, (
                f"Expected success payload {expected!r} but got {remote.data!r}{_context(message)}"
            )
        return remote.data

    @staticmethod
    def assert_failure(
        remote: RemoteData[Any, Any],
        expected: Any = _MISSING,
        message: str = "",
    ) -> Any:
        """Assert a Failure, optionally with a specific error, and return the error."""
        assert remote.is_failure(), (
            f"Expected Failure but got {remote!r}{_context(message)}"
        )
        if expected is not _MISSING:
            assert remote.error == expected, (
                f"Expected error {expected!r} but got {remote.error!r}{_context(message)}"
            )
        return remote.error

    @staticmethod
    def assert_variant(remote: RemoteData[Any, Any], variant: Variant, message: str = "") -> None:
        assert remote.variant is variant, (
            f"Expected {variant.name} but got {remote!r}{_context(message)}"
        )
