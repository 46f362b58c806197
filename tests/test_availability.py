"""
Unit tests for the availability and pricing engine
"""
import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from pawstay.domain.availability import (
    BlockedSet,
    DateRange,
    Quote,
    RangeRejected,
    RateSchedule,
    has_overlap,
    is_day_blocked,
    quote,
    validate_selection,
)


def schedule(holidays=(), base="50", holiday="75"):
    return RateSchedule.from_snapshot(base, holiday, holidays)


class TestIsDayBlocked:

    def test_day_inside_confirmed_range(self):
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 3), date(2025, 6, 6))])
        assert is_day_blocked(date(2025, 6, 4), blocked) is True

    def test_both_endpoints_are_blocked(self):
        """Check-in and checkout days of a confirmed stay are occupied"""
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 3), date(2025, 6, 6))])
        assert is_day_blocked(date(2025, 6, 3), blocked) is True
        assert is_day_blocked(date(2025, 6, 6), blocked) is True

    def test_day_outside_ranges(self):
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 3), date(2025, 6, 6))])
        assert is_day_blocked(date(2025, 6, 2), blocked) is False
        assert is_day_blocked(date(2025, 6, 7), blocked) is False

    def test_individually_blocked_date(self):
        blocked = BlockedSet.from_snapshot(blocked_dates=["2025-07-10"])
        assert is_day_blocked(date(2025, 7, 10), blocked) is True
        assert is_day_blocked(date(2025, 7, 11), blocked) is False


class TestHasOverlap:

    def test_shared_days_with_confirmed_range(self):
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 3), date(2025, 6, 6))])
        candidate = DateRange(date(2025, 6, 1), date(2025, 6, 4))
        assert has_overlap(candidate, blocked) is True

    def test_blocked_day_inside_candidate(self):
        blocked = BlockedSet.from_snapshot(blocked_dates=[date(2025, 7, 10)])
        candidate = DateRange(date(2025, 7, 9), date(2025, 7, 11))
        assert has_overlap(candidate, blocked) is True

    def test_checkout_on_existing_checkin_day_overlaps(self):
        """Endpoints are inclusive, so touching ranges share a day"""
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 10), date(2025, 6, 15))])
        candidate = DateRange(date(2025, 6, 5), date(2025, 6, 10))
        assert has_overlap(candidate, blocked) is True

    def test_day_before_existing_checkin_is_free(self):
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 10), date(2025, 6, 15))])
        candidate = DateRange(date(2025, 6, 5), date(2025, 6, 9))
        assert has_overlap(candidate, blocked) is False

    def test_candidate_containing_whole_booking(self):
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 10), date(2025, 6, 12))])
        candidate = DateRange(date(2025, 6, 1), date(2025, 6, 30))
        assert has_overlap(candidate, blocked) is True

    def test_zero_night_candidate_checks_its_day(self):
        blocked = BlockedSet.from_snapshot(blocked_dates=[date(2025, 8, 1)])
        assert has_overlap(DateRange(date(2025, 8, 1), date(2025, 8, 1)), blocked) is True
        assert has_overlap(DateRange(date(2025, 8, 2), date(2025, 8, 2)), blocked) is False

    def test_absent_candidate(self):
        blocked = BlockedSet.from_snapshot(blocked_dates=[date(2025, 8, 1)])
        assert has_overlap(None, blocked) is False

    def test_range_ending_on_date_max(self):
        candidate = DateRange(date(9999, 12, 30), date.max)
        assert has_overlap(candidate, BlockedSet()) is False
        blocked = BlockedSet.from_snapshot(blocked_dates=[date.max])
        assert has_overlap(candidate, blocked) is True

    def test_partial_candidate(self):
        blocked = BlockedSet.from_snapshot(blocked_dates=[date(2025, 8, 1)])
        assert has_overlap(DateRange(start=date(2025, 8, 1)), blocked) is False

    def test_reversed_range_is_inert(self):
        blocked = BlockedSet.from_snapshot(blocked_dates=[date(2025, 8, 2)])
        assert has_overlap(DateRange(date(2025, 8, 5), date(2025, 8, 1)), blocked) is False

    @pytest.mark.parametrize("offset", range(0, 40, 7))
    @pytest.mark.parametrize("length", [0, 1, 3, 14])
    def test_empty_blocked_set_never_overlaps(self, offset, length):
        start = date(2025, 1, 1) + timedelta(days=offset)
        candidate = DateRange(start, start + timedelta(days=length))
        assert has_overlap(candidate, BlockedSet()) is False

    @pytest.mark.parametrize("shift", range(-6, 7))
    def test_overlap_iff_ranges_share_a_day(self, shift):
        existing = DateRange(date(2025, 6, 10), date(2025, 6, 14))
        start = existing.start + timedelta(days=shift)
        candidate = DateRange(start, start + timedelta(days=2))

        shares_day = candidate.start <= existing.end and existing.start <= candidate.end
        assert has_overlap(candidate, BlockedSet.from_snapshot([existing])) is shares_day


class TestQuote:

    def test_three_nights_base_rate(self):
        result = quote(DateRange(date(2025, 6, 1), date(2025, 6, 4)), schedule())
        assert result.nights == 3
        assert result.total == Decimal("150.00")
        assert result.applied_rate == Decimal("50")
        assert result.is_holiday_stay is False

    def test_single_holiday_night_surcharges_whole_stay(self):
        result = quote(
            DateRange(date(2025, 6, 1), date(2025, 6, 4)),
            schedule(holidays=["2025-06-02"]),
        )
        assert result.is_holiday_stay is True
        assert result.applied_rate == Decimal("75")
        assert result.total == Decimal("225.00")

    def test_holiday_on_checkout_day_is_not_a_night(self):
        result = quote(
            DateRange(date(2025, 6, 1), date(2025, 6, 4)),
            schedule(holidays=["2025-06-04"]),
        )
        assert result.is_holiday_stay is False
        assert result.total == Decimal("150")

    def test_holiday_on_checkin_day_counts(self):
        result = quote(
            DateRange(date(2025, 6, 1), date(2025, 6, 4)),
            schedule(holidays=["2025-06-01"]),
        )
        assert result.is_holiday_stay is True

    def test_zero_night_stay(self):
        result = quote(DateRange(date(2025, 8, 1), date(2025, 8, 1)), schedule())
        assert result.nights == 0
        assert result.total == 0
        assert result.is_holiday_stay is False

    def test_absent_candidate_is_zero_quote(self):
        s = schedule()
        assert quote(None, s) == Quote(
            nights=0, total=Decimal("0"), applied_rate=s.base_rate, is_holiday_stay=False
        )

    def test_reversed_range_is_zero_quote(self):
        result = quote(DateRange(date(2025, 8, 5), date(2025, 8, 1)), schedule())
        assert result.nights == 0
        assert result.total == 0

    def test_zero_night_on_holiday_is_not_holiday_stay(self):
        result = quote(
            DateRange(date(2025, 12, 25), date(2025, 12, 25)),
            schedule(holidays=["2025-12-25"]),
        )
        assert result.is_holiday_stay is False
        assert result.applied_rate == Decimal("50")

    @pytest.mark.parametrize("nights", [0, 1, 2, 7, 30, 120])
    def test_no_holidays_means_base_rate_for_every_night(self, nights):
        candidate = DateRange(date(2025, 3, 1), date(2025, 3, 1) + timedelta(days=nights))
        result = quote(candidate, schedule(base="42.50"))
        assert result.nights == nights
        assert result.total == Decimal("42.50") * nights
        assert result.is_holiday_stay is False

    @pytest.mark.parametrize("holiday_offset", [0, 1, 4, 9])
    def test_any_holiday_night_applies_holiday_rate(self, holiday_offset):
        start = date(2025, 11, 20)
        candidate = DateRange(start, start + timedelta(days=10))
        holiday = start + timedelta(days=holiday_offset)
        result = quote(candidate, schedule(holidays=[holiday], holiday="80"))
        assert result.total == Decimal("80") * 10

    def test_datetime_inputs_are_truncated_to_days(self):
        candidate = DateRange.of(datetime(2025, 6, 1, 23, 30), "2025-06-04T01:15:00")
        assert quote(candidate, schedule()).nights == 3

    def test_quote_is_idempotent(self):
        candidate = DateRange(date(2025, 6, 1), date(2025, 6, 4))
        s = schedule(holidays=["2025-06-02"])
        assert quote(candidate, s) == quote(candidate, s)


class TestValidateSelection:

    def test_free_range_returned_unchanged(self):
        candidate = DateRange(date(2025, 6, 1), date(2025, 6, 4))
        assert validate_selection(candidate, BlockedSet()) is candidate

    def test_blocked_range_rejected(self):
        blocked = BlockedSet.from_snapshot([DateRange(date(2025, 6, 3), date(2025, 6, 6))])
        with pytest.raises(RangeRejected) as exc_info:
            validate_selection(DateRange(date(2025, 6, 1), date(2025, 6, 4)), blocked)
        assert exc_info.value.reason == "contains unavailable day"

    def test_absent_selection_passes(self):
        assert validate_selection(None, BlockedSet()) is None


class TestRateSchedule:

    def test_negative_rate_not_allowed(self):
        with pytest.raises(ValueError):
            RateSchedule(base_rate=Decimal("-1"), holiday_rate=Decimal("10"))
