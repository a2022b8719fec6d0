"""Unit tests for outcome and fetch-state invariants."""

import pytest

from ridejoin.domain.entities import FetchState, InvalidOutcome, Outcome
from ridejoin.domain.enums import OutcomeKind


class TestOutcome:
    @pytest.mark.parametrize(
        "kind", [OutcomeKind.GENERIC_REJECTION, OutcomeKind.UNKNOWN_ERROR]
    )
    def test_message_outcomes_require_text(self, kind):
        with pytest.raises(InvalidOutcome):
            Outcome(kind)
        with pytest.raises(InvalidOutcome):
            Outcome(kind, "")

    @pytest.mark.parametrize(
        "kind",
        [
            OutcomeKind.UNAUTHENTICATED,
            OutcomeKind.ALREADY_JOINED,
            OutcomeKind.SELF_RIDE,
            OutcomeKind.FULL,
            OutcomeKind.SUCCESS,
        ],
    )
    def test_named_outcomes_carry_no_message(self, kind):
        assert Outcome(kind).message is None
        with pytest.raises(InvalidOutcome):
            Outcome(kind, "extra")

    def test_outcomes_are_values(self):
        assert Outcome.unknown_error("boom") == Outcome(OutcomeKind.UNKNOWN_ERROR, "boom")


class TestFetchState:
    def test_loading_is_not_ready(self, ride):
        assert not FetchState(loading=True).is_ready
        assert not FetchState(loading=True, data=ride).is_ready

    def test_error_is_not_ready(self, ride):
        assert not FetchState(error="Ride not found").is_ready
        assert not FetchState(data=ride, error="stale").is_ready

    def test_loaded_is_ready(self, ride):
        assert FetchState(data=ride).is_ready
