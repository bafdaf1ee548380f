import datetime as dt

import pytest

from clinic.console.validation import parse_choice, parse_date
from clinic.domain.exceptions import InvalidDateError

TODAY = dt.date(2025, 1, 10)


class TestParseDate:
    """Accepts ``YYYY-MM-DD`` dates from today onward."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2025-01-10", "2025-01-10"),
            ("2025-01-11", "2025-01-11"),
            ("2026-12-31", "2026-12-31"),
            ("  2025-02-01 ", "2025-02-01"),
            ("2025-2-1", "2025-02-01"),
        ],
        ids=["today", "tomorrow", "next-year", "whitespace", "unpadded"],
    )
    def test_accepts(self, text: str, expected: str) -> None:
        assert parse_date(text, TODAY) == expected

    @pytest.mark.parametrize(
        "text",
        ["2025-01-09", "2024-12-31", "1999-01-10"],
        ids=["yesterday", "last-year", "long-ago"],
    )
    def test_rejects_past(self, text: str) -> None:
        with pytest.raises(InvalidDateError, match="today or in the future"):
            parse_date(text, TODAY)

    @pytest.mark.parametrize(
        "text",
        ["", "tomorrow", "10.01.2025", "2025-02-30", "2025-13-01"],
        ids=["empty", "word", "dotted", "no-such-day", "no-such-month"],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(InvalidDateError, match="expected YYYY-MM-DD"):
            parse_date(text, TODAY)

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_date("nope", TODAY)


class TestParseChoice:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("1", 1), (" 12 ", 12), ("0", 0), ("-3", -3), ("x", None), ("", None)],
        ids=["one", "padded", "zero", "negative", "letter", "empty"],
    )
    def test_parse(self, text: str, expected: int | None) -> None:
        assert parse_choice(text) == expected
