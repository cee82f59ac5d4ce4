"""Tests for the change frequency heuristic: thresholds and edge cases."""

from datetime import datetime, timedelta

import pytest

from app.schemas.sitemap import ChangeFrequency
from app.services.change_frequency import estimate_change_frequency

NOW = datetime(2024, 6, 1, 12, 0, 0)


def _estimate(elapsed: timedelta, revisions: int = 0) -> ChangeFrequency:
    return estimate_change_frequency(NOW - elapsed, NOW, revisions)


class TestChangeFrequencyBuckets:
    @pytest.mark.parametrize("elapsed, expected", [
        (timedelta(days=400), ChangeFrequency.YEARLY),
        (timedelta(days=90), ChangeFrequency.MONTHLY),
        (timedelta(days=10), ChangeFrequency.WEEKLY),
        (timedelta(days=2), ChangeFrequency.DAILY),
        (timedelta(hours=3), ChangeFrequency.HOURLY),
        (timedelta(minutes=30), ChangeFrequency.ALWAYS),
    ])
    def test_single_revision_lifetime(self, elapsed, expected):
        assert _estimate(elapsed) == expected

    def test_brand_new_page_is_always(self):
        assert estimate_change_frequency(NOW, NOW, 0) == ChangeFrequency.ALWAYS

    def test_revisions_shorten_period(self):
        """181 days over 2 revisions is ~90.5 days between edits."""
        created = datetime(2023, 1, 1)
        now = datetime(2023, 7, 1)
        assert (now - created).days == 181
        assert estimate_change_frequency(created, now, 1) == ChangeFrequency.MONTHLY

    def test_many_revisions_bring_frequency_up(self):
        # 100 days / 101 is just under a day
        assert _estimate(timedelta(days=100), revisions=100) == ChangeFrequency.HOURLY


class TestChangeFrequencyBoundaries:
    """Thresholds are exclusive: exactly on a boundary falls into the shorter bucket."""

    @pytest.mark.parametrize("elapsed, expected", [
        (timedelta(days=365), ChangeFrequency.MONTHLY),
        (timedelta(days=30), ChangeFrequency.WEEKLY),
        (timedelta(days=7), ChangeFrequency.DAILY),
        (timedelta(days=1), ChangeFrequency.HOURLY),
        (timedelta(hours=1), ChangeFrequency.ALWAYS),
    ])
    def test_exactly_on_threshold(self, elapsed, expected):
        assert _estimate(elapsed) == expected

    def test_one_second_past_threshold(self):
        assert _estimate(timedelta(days=365, seconds=1)) == ChangeFrequency.YEARLY

    def test_created_in_future_counts_as_zero(self):
        assert estimate_change_frequency(NOW + timedelta(days=30), NOW, 0) == ChangeFrequency.ALWAYS
