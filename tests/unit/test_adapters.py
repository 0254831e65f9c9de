"""
Unit tests for the producer adapters.

Uses SimpleNamespace snapshots (see tests.conftest) as fake producers.

Test categories:
  - two-flag queries: every valid (status, fetch_status) pair and the rejects
  - four-boolean queries: every valid combination and the rejects
  - mutations: every status and the rejects
  - to_remote: structural detection of the producer shape
  - is_* predicates applied to snapshots directly
  - rejects are logged before raising
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from remote_data import (
    Failure,
    InvalidSignalError,
    RemoteDataError,
    failure,
    from_flags,
    from_mutation,
    from_query,
    initial,
    is_failure,
    is_initial,
    is_pending,
    is_stale,
    is_success,
    pending,
    success,
    to_remote,
)
from remote_data.remote import Activity, LifecycleStatus
from tests.conftest import (
    FAILURE_VALUE,
    PENDING_VALUE,
    SUCCESS_VALUE,
    flag_signal,
    mutation_signal,
    query_signal,
)

# ─────────────────────── Two-flag queries ───────────────────────


class TestFromQuery:
    """Verify classification of two-flag query snapshots."""

    def test_loading_idle_is_initial(self) -> None:
        """
        GIVEN status=loading, fetch_status=idle
        WHEN adapted
        THEN the result is Initial.
        """
        assert from_query(query_signal("loading", "idle")) == initial

    @pytest.mark.parametrize("status", ["loading", "success", "error"])
    def test_fetching_is_pending_regardless_of_status(self, status: str) -> None:
        """
        GIVEN fetch_status=fetching with any status
        WHEN adapted
        THEN the result is Pending.
        """
        assert from_query(query_signal(status, "fetching")) == pending()

    def test_fetching_keeps_stale_data(self) -> None:
        """
        GIVEN a refetch in flight with data from the previous success
        WHEN adapted
        THEN the result is a stale Pending carrying that data.
        """
        remote = from_query(query_signal("success", "fetching", data=PENDING_VALUE))
        assert remote == pending(PENDING_VALUE)

    def test_success_idle_is_success(self) -> None:
        assert from_query(query_signal("success", "idle", data=SUCCESS_VALUE)) == success(SUCCESS_VALUE)

    def test_error_idle_is_failure(self) -> None:
        assert from_query(query_signal("error", "idle", error=FAILURE_VALUE)) == failure(FAILURE_VALUE)

    def test_error_keeps_stale_data(self) -> None:
        remote = from_query(query_signal("error", "idle", data=PENDING_VALUE, error=FAILURE_VALUE))
        assert remote == Failure(FAILURE_VALUE, PENDING_VALUE)

    def test_enum_flags_are_accepted(self) -> None:
        signal = query_signal(LifecycleStatus.SUCCESS, Activity.IDLE, data=SUCCESS_VALUE)
        assert from_query(signal) == success(SUCCESS_VALUE)

    def test_canonical_value_round_trips(self) -> None:
        """
        GIVEN a canonical RemoteData (which exposes the same two flags)
        WHEN read back as a query snapshot
        THEN the same value is produced.
        """
        for remote in (initial, pending(), pending(PENDING_VALUE), failure(FAILURE_VALUE), success(SUCCESS_VALUE)):
            assert from_query(remote) == remote

    def test_handles_are_carried(self) -> None:
        refetch, remove = MagicMock(), MagicMock()
        remote = from_query(query_signal("success", "idle", data=1, refetch=refetch, remove=remove))
        remote.refetch()
        remote.remove()
        refetch.assert_called_once_with()
        remove.assert_called_once_with()

    def test_non_callable_handles_become_noop(self) -> None:
        remote = from_query(query_signal("loading", "idle", refetch="not callable"))
        assert remote.refetch() is None

    @pytest.mark.parametrize(
        ("status", "fetch_status"),
        [
            ("paused", "idle"),
            ("loading", "paused"),
            ("", ""),
        ],
    )
    def test_unknown_flags_are_rejected(self, status: str, fetch_status: str) -> None:
        """
        GIVEN a flag value outside the two-flag encoding
        WHEN adapted
        THEN InvalidSignalError is raised.
        """
        with pytest.raises(InvalidSignalError) as excinfo:
            from_query(query_signal(status, fetch_status))
        assert excinfo.value.encoding == "two-flag"
        assert excinfo.value.flags == {"status": status, "fetch_status": fetch_status}

    def test_success_without_data_is_rejected(self) -> None:
        with pytest.raises(InvalidSignalError, match="success without data"):
            from_query(query_signal("success", "idle"))

    def test_error_without_error_value_is_rejected(self) -> None:
        with pytest.raises(InvalidSignalError, match="error without an error value"):
            from_query(query_signal("error", "idle"))

    def test_reject_is_logged(self) -> None:
        """
        GIVEN an invalid snapshot
        WHEN adapted
        THEN a signal.rejected event is logged before raising.
        """
        with capture_logs() as logs, pytest.raises(InvalidSignalError):
            from_query(query_signal("paused", "idle"))
        assert logs[0]["event"] == "signal.rejected"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["encoding"] == "two-flag"
        assert logs[0]["status"] == "paused"


# ─────────────────────── Four-boolean queries ───────────────────────


class TestFromFlags:
    """Verify classification of four-boolean query snapshots."""

    def test_idle_is_initial(self) -> None:
        assert from_flags(flag_signal(is_idle=True)) == initial

    def test_fetching_is_pending(self) -> None:
        assert from_flags(flag_signal(is_fetching=True)) == pending()

    def test_refetch_after_success_is_stale_pending(self) -> None:
        """
        GIVEN is_success and is_fetching with data
        WHEN adapted
        THEN the result is a stale Pending.
        """
        remote = from_flags(flag_signal(is_fetching=True, is_success=True, data=PENDING_VALUE))
        assert remote == pending(PENDING_VALUE)

    def test_error_is_failure(self) -> None:
        assert from_flags(flag_signal(is_error=True, error=FAILURE_VALUE)) == failure(FAILURE_VALUE)

    def test_success_is_success(self) -> None:
        assert from_flags(flag_signal(is_success=True, data=SUCCESS_VALUE)) == success(SUCCESS_VALUE)

    @pytest.mark.parametrize(
        ("flags", "reason"),
        [
            ({"is_idle": True, "is_fetching": True}, "idle combined"),
            ({"is_idle": True, "is_success": True}, "idle combined"),
            ({"is_fetching": True, "is_error": True}, "fetching while in error"),
            ({"is_error": True, "is_success": True}, "error and success both set"),
            ({}, "no flag set"),
        ],
    )
    def test_invalid_combinations_are_rejected(self, flags: dict, reason: str) -> None:
        """
        GIVEN a flag combination outside the valid table
        WHEN adapted
        THEN InvalidSignalError is raised naming the problem.
        """
        with pytest.raises(InvalidSignalError, match=reason) as excinfo:
            from_flags(flag_signal(data=1, error="e", **flags))
        assert excinfo.value.encoding == "boolean-flags"

    def test_success_without_data_is_rejected(self) -> None:
        with pytest.raises(InvalidSignalError, match="success without data"):
            from_flags(flag_signal(is_success=True))

    def test_retry_still_flagged_as_error_is_rejected(self) -> None:
        """
        GIVEN a retry after a failure that still reports is_error
        WHEN adapted
        THEN it is rejected rather than read as Pending or Failure.
        """
        with capture_logs() as logs, pytest.raises(InvalidSignalError, match="fetching while in error"):
            from_flags(flag_signal(is_fetching=True, is_error=True, error=FAILURE_VALUE, data=PENDING_VALUE))
        assert logs[0]["reason"] == "fetching while in error"
        assert from_flags(flag_signal(is_fetching=True, data=PENDING_VALUE)) == pending(PENDING_VALUE)

    def test_classification_agrees_with_two_flag_encoding(self) -> None:
        """
        GIVEN the same lifecycle expressed in both encodings
        WHEN each is adapted
        THEN both produce the same variant.
        """
        pairs = [
            (query_signal("loading", "idle"), flag_signal(is_idle=True)),
            (query_signal("success", "fetching", data=3), flag_signal(is_fetching=True, data=3)),
            (query_signal("error", "idle", error=2), flag_signal(is_error=True, error=2)),
            (query_signal("success", "idle", data=1), flag_signal(is_success=True, data=1)),
        ]
        for two_flag, booleans in pairs:
            assert from_query(two_flag) == from_flags(booleans)


# ─────────────────────── Mutations ───────────────────────


class TestFromMutation:
    @pytest.mark.parametrize(
        ("signal", "expected"),
        [
            (mutation_signal("idle"), initial),
            (mutation_signal("loading", data=5), pending()),
            (mutation_signal("success", data=SUCCESS_VALUE), success(SUCCESS_VALUE)),
            (mutation_signal("error", error=FAILURE_VALUE), failure(FAILURE_VALUE)),
        ],
    )
    def test_status_mapping(self, signal, expected) -> None:
        assert from_mutation(signal) == expected

    def test_unknown_status_is_rejected(self) -> None:
        with pytest.raises(InvalidSignalError) as excinfo:
            from_mutation(mutation_signal("paused"))
        assert excinfo.value.encoding == "mutation"

    def test_error_is_a_remote_data_error_and_value_error(self) -> None:
        with pytest.raises(RemoteDataError):
            from_mutation(mutation_signal("success"))
        with pytest.raises(ValueError):
            from_mutation(mutation_signal("error"))


# ─────────────────────── Structural detection ───────────────────────


class TestToRemote:
    def test_canonical_values_are_returned_as_is(self) -> None:
        remote = success(SUCCESS_VALUE)
        assert to_remote(remote) is remote

    def test_two_flag_snapshot(self) -> None:
        assert is_pending(to_remote(query_signal("loading", "fetching")))

    def test_boolean_snapshot(self) -> None:
        assert is_initial(to_remote(flag_signal(is_idle=True)))

    def test_mutation_snapshot(self) -> None:
        assert is_success(to_remote(mutation_signal("success", data=1)))

    def test_unrecognised_object(self) -> None:
        with pytest.raises(TypeError, match="Cannot interpret SimpleNamespace"):
            to_remote(SimpleNamespace(value=1))


# ─────────────────────── Predicates on snapshots ───────────────────────


PREDICATES = {
    "initial": is_initial,
    "pending": is_pending,
    "failure": is_failure,
    "success": is_success,
}


class TestPredicatesOnSnapshots:
    """Verify the is_* predicates classify producer snapshots directly."""

    @pytest.mark.parametrize(
        ("name", "signal"),
        [
            ("initial", query_signal("loading", "idle")),
            ("pending", query_signal("success", "fetching", data=PENDING_VALUE)),
            ("failure", query_signal("error", "idle", error=FAILURE_VALUE)),
            ("success", query_signal("success", "idle", data=SUCCESS_VALUE)),
            ("initial", flag_signal(is_idle=True)),
            ("pending", flag_signal(is_fetching=True)),
            ("failure", flag_signal(is_error=True, error=FAILURE_VALUE)),
            ("success", flag_signal(is_success=True, data=SUCCESS_VALUE)),
            ("initial", mutation_signal("idle")),
            ("pending", mutation_signal("loading")),
            ("failure", mutation_signal("error", error=FAILURE_VALUE)),
            ("success", mutation_signal("success", data=SUCCESS_VALUE)),
        ],
    )
    def test_exactly_one_predicate_holds(self, name: str, signal: SimpleNamespace) -> None:
        """
        GIVEN a valid snapshot in any of the three encodings
        WHEN each predicate is applied to it without adapting first
        THEN exactly the predicate of its variant holds.
        """
        for predicate_name, predicate in PREDICATES.items():
            assert predicate(signal) is (predicate_name == name), predicate_name

    def test_stale_snapshot(self) -> None:
        assert is_stale(query_signal("success", "fetching", data=PENDING_VALUE))
        assert is_stale(flag_signal(is_fetching=True, is_success=True, data=PENDING_VALUE))
        assert not is_stale(query_signal("loading", "fetching"))
        assert not is_stale(mutation_signal("loading", data=PENDING_VALUE))

    def test_predicates_agree_with_to_remote(self) -> None:
        signal = flag_signal(is_error=True, error=FAILURE_VALUE)
        assert is_failure(signal) is to_remote(signal).is_failure()
