"""Tests for prchain.utils.formatting."""

from prchain.utils.formatting import fmt_duration, fmt_progress


class TestFmtDuration:
    def test_seconds(self):
        assert fmt_duration(8) == "8s"

    def test_minutes(self):
        assert fmt_duration(125) == "2m 5s"

    def test_hours(self):
        assert fmt_duration(3725) == "1h 2m 5s"


class TestFmtProgress:
    def test_over(self):
        assert fmt_progress(7, 5) == "7/5 lines (140%)"

    def test_under(self):
        assert fmt_progress(2, 5) == "2/5 lines (40%)"

    def test_zero_threshold(self):
        assert fmt_progress(3, 0) == "3/0 lines (100%)"
