"""Tests for the token parsers and shared matchers.

Each parser is exercised directly against a fresh ComponentAccumulator so
digit limits, range checks and accumulator writes are visible without the
engine's resolution step.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from chronoform.constants import MAX_DIGIT_RUN
from chronoform.enums import TokenSymbol
from chronoform.locales import EN_US
from chronoform.parsing import PARSERS, ComponentAccumulator
from chronoform.parsing.tokens import (
    match_name,
    parse_day,
    parse_day_of_year,
    parse_day_period,
    parse_era,
    parse_fraction,
    parse_hour,
    parse_hour12,
    parse_minute,
    parse_month,
    parse_second,
    parse_weekday,
    parse_year,
    read_digits,
)


@pytest.fixture
def acc() -> ComponentAccumulator:
    return ComponentAccumulator()


class TestReadDigits:
    """read_digits() is greedy up to the maximum and ASCII-only."""

    def test_stops_at_non_digit(self) -> None:
        assert read_digits("2024-01", 0, 1, None) == (2024, 4)

    def test_stops_at_max(self) -> None:
        assert read_digits("123456", 0, 1, 4) == (1234, 4)

    def test_requires_min(self) -> None:
        assert read_digits("1", 0, 2, 2) is None

    def test_offset(self) -> None:
        assert read_digits("ab12", 2, 1, 2) == (12, 4)

    def test_non_ascii_digits_rejected(self) -> None:
        assert read_digits("٢٠٢٤", 0, 1, None) is None

    def test_over_long_run_rejected(self) -> None:
        assert read_digits("1" * 5000, 0, 1, None) is None
        assert read_digits("9" * (MAX_DIGIT_RUN + 1) + "x", 0, 1, None) is None

    def test_run_at_cap_accepted(self) -> None:
        assert read_digits("7" * MAX_DIGIT_RUN, 0, 1, None) == (
            int("7" * MAX_DIGIT_RUN),
            MAX_DIGIT_RUN,
        )

    def test_exact_width_beyond_cap_rejected(self) -> None:
        assert read_digits("1" * 5000, 0, 5000, 5000) is None

    @given(number=st.integers(min_value=0, max_value=10**12))
    @settings(max_examples=100)
    def test_reads_back_any_number(self, number: int) -> None:
        text = str(number)
        assert read_digits(text + "x", 0, 1, None) == (number, len(text))


class TestMatchName:
    """match_name() honours candidate order and ignores case."""

    def test_case_insensitive(self) -> None:
        assert match_name("JANUARY", 0, (("January", 0),)) == (0, 7)

    def test_first_candidate_wins(self) -> None:
        candidates = (("BCE", 0), ("BC", 0))
        assert match_name("BCE", 0, candidates) == (0, 3)

    def test_no_match(self) -> None:
        assert match_name("Foo", 0, (("Bar", 1),)) is None


class TestYear:
    """Year digit counts by width and the two-digit pivot."""

    def test_single_letter_unbounded(self, acc: ComponentAccumulator) -> None:
        assert parse_year("123456", 0, 1, EN_US, acc) == 6
        assert acc.year == 123456

    @pytest.mark.parametrize(
        ("text", "expected"), [("00", 2000), ("49", 2049), ("50", 1950), ("99", 1999)]
    )
    def test_two_digit_pivot(self, text: str, expected: int, acc: ComponentAccumulator) -> None:
        assert parse_year(text, 0, 2, EN_US, acc) == 2
        assert acc.year == expected

    def test_two_digit_requires_two(self, acc: ComponentAccumulator) -> None:
        assert parse_year("5", 0, 2, EN_US, acc) is None

    def test_four_letters_read_one_to_four(self, acc: ComponentAccumulator) -> None:
        assert parse_year("24", 0, 4, EN_US, acc) == 2
        assert acc.year == 24
        assert parse_year("20245", 0, 4, EN_US, acc) == 4
        assert acc.year == 2024

    def test_five_letters_exact(self, acc: ComponentAccumulator) -> None:
        assert parse_year("02024", 0, 5, EN_US, acc) == 5
        assert acc.year == 2024
        assert parse_year("2024", 0, 5, EN_US, acc) is None

    @pytest.mark.parametrize("width", [1, 4301])
    def test_huge_digit_runs_fail(self, width: int, acc: ComponentAccumulator) -> None:
        assert parse_year("1" * 5000, 0, width, EN_US, acc) is None
        assert acc.year is None


class TestMonth:
    """Numeric and named months; day reset."""

    def test_numeric(self, acc: ComponentAccumulator) -> None:
        assert parse_month("12", 0, 2, EN_US, acc) == 2
        assert acc.month == 11
        assert acc.day == 1

    def test_single_letter_reads_up_to_two(self, acc: ComponentAccumulator) -> None:
        assert parse_month("1/", 0, 1, EN_US, acc) == 1
        assert acc.month == 0

    @pytest.mark.parametrize("text", ["13", "00"])
    def test_out_of_range(self, text: str, acc: ComponentAccumulator) -> None:
        assert parse_month(text, 0, 2, EN_US, acc) is None

    def test_two_letters_require_two_digits(self, acc: ComponentAccumulator) -> None:
        assert parse_month("1", 0, 2, EN_US, acc) is None

    def test_names_by_width(self, acc: ComponentAccumulator) -> None:
        assert parse_month("september", 0, 4, EN_US, acc) == 9
        assert acc.month == 8
        assert parse_month("Sep", 0, 3, EN_US, acc) == 3
        assert parse_month("September", 0, 3, EN_US, acc) == 3

    def test_day_reset_skipped_when_day_parsed(self, acc: ComponentAccumulator) -> None:
        acc.day, acc.day_parsed = 20, True
        parse_month("03", 0, 2, EN_US, acc)
        assert acc.day == 20


class TestDayFields:
    """Day of month and day of year."""

    def test_day(self, acc: ComponentAccumulator) -> None:
        assert parse_day("31", 0, 2, EN_US, acc) == 2
        assert (acc.day, acc.day_parsed) == (31, True)

    @pytest.mark.parametrize("text", ["32", "00"])
    def test_day_out_of_range(self, text: str, acc: ComponentAccumulator) -> None:
        assert parse_day(text, 0, 2, EN_US, acc) is None

    def test_day_of_year_widths(self, acc: ComponentAccumulator) -> None:
        assert parse_day_of_year("60", 0, 1, EN_US, acc) == 2
        assert parse_day_of_year("6", 0, 2, EN_US, acc) is None
        assert parse_day_of_year("060", 0, 3, EN_US, acc) == 3
        assert acc.day_of_year == 60
        assert acc.day_parsed

    def test_day_of_year_out_of_range(self, acc: ComponentAccumulator) -> None:
        assert parse_day_of_year("367", 0, 3, EN_US, acc) is None


class TestTimeFields:
    """Hours, minutes, seconds and fractions."""

    def test_hour(self, acc: ComponentAccumulator) -> None:
        assert parse_hour("23", 0, 2, EN_US, acc) == 2
        assert acc.hour == 23
        assert parse_hour("24", 0, 2, EN_US, acc) is None

    def test_hour12_range(self, acc: ComponentAccumulator) -> None:
        assert parse_hour12("12", 0, 2, EN_US, acc) == 2
        assert acc.hour12 == 12
        assert parse_hour12("00", 0, 2, EN_US, acc) is None
        assert parse_hour12("13", 0, 2, EN_US, acc) is None

    def test_minute_and_second(self, acc: ComponentAccumulator) -> None:
        assert parse_minute("59", 0, 2, EN_US, acc) == 2
        assert parse_second("7", 0, 1, EN_US, acc) == 1
        assert (acc.minute, acc.second) == (59, 7)
        assert parse_minute("60", 0, 2, EN_US, acc) is None

    @pytest.mark.parametrize(
        ("text", "width", "expected"),
        [("5", 1, 500), ("12", 2, 120), ("123", 3, 123), ("123456", 6, 123)],
    )
    def test_fraction(
        self, text: str, width: int, expected: int, acc: ComponentAccumulator
    ) -> None:
        assert parse_fraction(text, 0, width, EN_US, acc) == width
        assert acc.millisecond == expected

    def test_fraction_requires_exact_width(self, acc: ComponentAccumulator) -> None:
        assert parse_fraction("5", 0, 3, EN_US, acc) is None
        assert parse_fraction("1a3", 0, 3, EN_US, acc) is None


class TestTextFields:
    """Era, weekday and day period names."""

    @pytest.mark.parametrize(
        ("text", "negative", "consumed"),
        [
            ("BC", True, 2),
            ("BCE", True, 3),
            ("b.c.e.", True, 6),
            ("Before Common Era", True, 17),
            ("AD", False, 2),
            ("CE", False, 2),
            ("Anno Domini", False, 11),
            ("A", False, 1),
        ],
    )
    def test_era(
        self, text: str, negative: bool, consumed: int, acc: ComponentAccumulator
    ) -> None:
        assert parse_era(text, 0, 1, EN_US, acc) == consumed
        assert acc.era_negative is negative
        assert acc.day == 1

    def test_era_unknown(self, acc: ComponentAccumulator) -> None:
        assert parse_era("XYZ", 0, 1, EN_US, acc) is None

    def test_weekday_is_validation_only(self, acc: ComponentAccumulator) -> None:
        assert parse_weekday("Friday", 0, 4, EN_US, acc) == 6
        assert acc == ComponentAccumulator()

    def test_weekday_uses_active_width(self, acc: ComponentAccumulator) -> None:
        assert parse_weekday("Friday", 0, 3, EN_US, acc) == 3
        assert parse_weekday("Xyz", 0, 3, EN_US, acc) is None

    @pytest.mark.parametrize(
        ("text", "is_pm", "consumed"),
        [("AM", False, 2), ("pm", True, 2), ("p", True, 1), ("PM (afternoon)", True, 14)],
    )
    def test_day_period_is_lenient(
        self, text: str, is_pm: bool, consumed: int, acc: ComponentAccumulator
    ) -> None:
        assert parse_day_period(text, 0, 1, EN_US, acc) == consumed
        assert acc.is_pm is is_pm


def test_every_symbol_registered() -> None:
    assert set(PARSERS) == set(TokenSymbol)
