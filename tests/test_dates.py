"""Tests for strict date normalisation."""

import pytest

from shared.dates import is_strict_date, normalize_date


class TestNormalizeDate:
    def test_plain_date(self):
        assert normalize_date("2024-03-15") == "2024-03-15"

    def test_date_inside_text(self):
        assert normalize_date("Incident reported on 2024-03-15 at 10:00") == "2024-03-15"

    def test_timestamp(self):
        assert normalize_date("2024-03-16T09:30:00Z") == "2024-03-16"

    def test_impossible_day_is_rejected(self):
        assert normalize_date("Incident reported on 2024-02-30") is None

    def test_leap_day(self):
        assert normalize_date("2024-02-29") == "2024-02-29"
        assert normalize_date("2023-02-29") is None

    @pytest.mark.parametrize("text", ["2024-13-01", "2024-04-31", "2024-00-10", "2024-01-00"])
    def test_invalid_month_or_day(self, text):
        assert normalize_date(text) is None

    @pytest.mark.parametrize("text", ["Not Found", "Not Specified", "", None, "15/03/2024", "2024-3-15"])
    def test_no_strict_date(self, text):
        assert normalize_date(text) is None

    def test_only_first_match_is_considered(self):
        assert normalize_date("2024-02-30 or 2024-03-01") is None


class TestIsStrictDate:
    def test_accepts_exact_date(self):
        assert is_strict_date("2024-03-15")

    @pytest.mark.parametrize("value", ["2024-02-30", "on 2024-03-15", "2024-03-15T00:00:00Z", "", None])
    def test_rejects_everything_else(self, value):
        assert not is_strict_date(value)
