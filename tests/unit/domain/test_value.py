"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from midweek.domain.value import Attendance, UserName


class TestUserName:
    """Tests for UserName."""

    def test_strips_whitespace(self):
        assert UserName("  Alice  ").root == "Alice"

    @pytest.mark.parametrize("value", ["", "   ", "x" * 101])
    def test_rejects_invalid_length(self, value):
        with pytest.raises(ValidationError):
            UserName(value)

    def test_accepts_maximum_length(self):
        assert UserName("x" * 100).root == "x" * 100


class TestAttendance:
    """Tests for Attendance."""

    def test_only_yes_counts_toward_total(self):
        assert Attendance.YES.counts_toward_total
        assert not Attendance.NO.counts_toward_total

    def test_rejects_unknown_value(self):
        with pytest.raises(ValueError):
            Attendance("maybe")
