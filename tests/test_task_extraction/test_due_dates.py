"""Tests for due date extraction."""

from datetime import datetime

import pytest

from voice_tasks.task_extraction.due_dates import (
    DATE_PATTERNS,
    extract_due_date,
    parse_captured_date,
    resolve_relative_keyword,
)
from voice_tasks.task_extraction.exceptions import DateParseError

# Wednesday
FIXED_NOW = datetime(2025, 3, 12, 9, 30)
SATURDAY_NOW = datetime(2025, 3, 15, 18, 0)
SUNDAY_NOW = datetime(2025, 3, 16, 8, 0)


@pytest.mark.unit
class TestDatePatternTable:
    """Test cases for the ordered date pattern table."""

    def test_pattern_order(self) -> None:
        """Test patterns are evaluated relative days first, offsets last."""
        names = [pattern.name for pattern in DATE_PATTERNS]

        assert names == ["relative_day", "month_name", "numeric", "weekday", "offset"]

    def test_relative_day_pattern_has_no_capture(self) -> None:
        """Test the relative-day pattern resolves through keywords only."""
        assert DATE_PATTERNS[0].regex.groups == 0


@pytest.mark.unit
class TestRelativeKeywords:
    """Test cases for relative-day keyword resolution."""

    def test_tomorrow(self) -> None:
        """Test 'tomorrow' resolves to one day later."""
        assert resolve_relative_keyword("call mom tomorrow", FIXED_NOW) == datetime(
            2025, 3, 13, 9, 30
        )

    def test_today(self) -> None:
        """Test 'today' resolves to the current instant."""
        assert resolve_relative_keyword("buy milk today", FIXED_NOW) == FIXED_NOW

    def test_next_week(self) -> None:
        """Test 'next week' resolves to seven days later."""
        assert resolve_relative_keyword("meet next week", FIXED_NOW) == datetime(
            2025, 3, 19, 9, 30
        )

    def test_next_month_is_calendar_month(self) -> None:
        """Test 'next month' adds one calendar month."""
        assert resolve_relative_keyword("finish next month", FIXED_NOW) == datetime(
            2025, 4, 12, 9, 30
        )

    def test_next_month_clamps_to_month_end(self) -> None:
        """Test 'next month' from January 31st lands on the last day of February."""
        now = datetime(2025, 1, 31, 12, 0)

        assert resolve_relative_keyword("pay rent next month", now) == datetime(
            2025, 2, 28, 12, 0
        )

    def test_this_weekend_midweek(self) -> None:
        """Test 'this weekend' on a Wednesday resolves to Saturday."""
        assert resolve_relative_keyword("clean this weekend", FIXED_NOW) == datetime(
            2025, 3, 15, 9, 30
        )

    def test_this_weekend_on_saturday(self) -> None:
        """Test 'this weekend' on a Saturday resolves to the same day."""
        assert resolve_relative_keyword("clean this weekend", SATURDAY_NOW) == SATURDAY_NOW

    def test_this_weekend_on_sunday(self) -> None:
        """Test 'this weekend' on a Sunday resolves six days ahead."""
        assert resolve_relative_keyword("clean this weekend", SUNDAY_NOW) == datetime(
            2025, 3, 22, 8, 0
        )

    def test_keyword_priority(self) -> None:
        """Test 'tomorrow' wins over 'next week' regardless of position."""
        text = "schedule it next week, no wait, tomorrow"

        assert resolve_relative_keyword(text, FIXED_NOW) == datetime(2025, 3, 13, 9, 30)

    def test_no_keyword(self) -> None:
        """Test None is returned when no keyword is present."""
        assert resolve_relative_keyword("submit by 12/31/2023", FIXED_NOW) is None


@pytest.mark.unit
class TestParseCapturedDate:
    """Test cases for parsing captured date expressions."""

    def test_missing_capture_raises(self) -> None:
        """Test a pattern without a capture cannot be parsed."""
        with pytest.raises(DateParseError):
            parse_captured_date(None, FIXED_NOW)

    def test_unparseable_capture_raises(self) -> None:
        """Test an impossible date raises DateParseError."""
        with pytest.raises(DateParseError):
            parse_captured_date("13/45/2023", FIXED_NOW)

    def test_offset_in_days(self) -> None:
        """Test an 'N days' offset is added to now."""
        assert parse_captured_date("3 days", FIXED_NOW) == datetime(2025, 3, 15, 9, 30)

    def test_offset_singular_unit(self) -> None:
        """Test a singular unit is accepted."""
        assert parse_captured_date("1 month", FIXED_NOW) == datetime(2025, 4, 12, 9, 30)

    def test_numeric_date_is_month_first(self) -> None:
        """Test M/D/YYYY dates parse month first at midnight."""
        assert parse_captured_date("12/31/2023", FIXED_NOW) == datetime(2023, 12, 31)


@pytest.mark.unit
class TestExtractDueDate:
    """Test cases for the full due date extraction."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("need to call the doctor on january 15th, 2024", datetime(2024, 1, 15)),
            ("have to submit the report by 12/31/2023", datetime(2023, 12, 31)),
            ("renew the passport before 3 feb 2026", datetime(2026, 2, 3)),
            ("book the venue on march 1st 2026", datetime(2026, 3, 1)),
            ("going to clean the house in 3 days", datetime(2025, 3, 15, 9, 30)),
            ("need to call the client after 2 weeks", datetime(2025, 3, 26, 9, 30)),
            ("have to complete the project in 1 month", datetime(2025, 4, 12, 9, 30)),
            ("plan to move in 2 years", datetime(2027, 3, 12, 9, 30)),
        ],
    )
    def test_explicit_and_offset_dates(self, text: str, expected: datetime) -> None:
        """Test explicit dates and relative offsets resolve to the expected date."""
        assert extract_due_date(text, FIXED_NOW) == expected

    def test_weekday_resolves_to_next_occurrence(self) -> None:
        """Test 'next friday' resolves to the coming Friday."""
        due_date = extract_due_date("should prepare the presentation by next friday", FIXED_NOW)

        assert due_date == datetime(2025, 3, 14)

    def test_weekday_matching_today(self) -> None:
        """Test a weekday equal to today resolves to today."""
        assert extract_due_date("call her on wednesday", FIXED_NOW) == datetime(2025, 3, 12)

    def test_weekday_without_lead_word_is_ignored(self) -> None:
        """Test a bare weekday is not treated as a due date."""
        assert extract_due_date("need to prepare the report by friday", FIXED_NOW) is None

    def test_relative_keyword_wins_over_explicit_date(self) -> None:
        """Test relative keywords take priority over an explicit date in the text."""
        text = "submit the report by 12/31/2023 or next week at the latest"

        assert extract_due_date(text, FIXED_NOW) == datetime(2025, 3, 19, 9, 30)

    def test_this_week_alone_has_no_date(self) -> None:
        """Test 'this week' matches but cannot be resolved on its own."""
        assert extract_due_date("have to get my flu shot this week", FIXED_NOW) is None

    def test_this_week_falls_through_to_weekday(self) -> None:
        """Test an unresolved match moves on to later patterns."""
        assert extract_due_date("sometime this week on friday", FIXED_NOW) == datetime(
            2025, 3, 14
        )

    def test_invalid_numeric_date_falls_through(self) -> None:
        """Test a failed parse continues with the next pattern."""
        text = "submit it by 13/45/2023 or in 3 days"

        assert extract_due_date(text, FIXED_NOW) == datetime(2025, 3, 15, 9, 30)

    def test_no_date(self) -> None:
        """Test None is returned when no pattern matches."""
        assert extract_due_date("need to buy milk", FIXED_NOW) is None
