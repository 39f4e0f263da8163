"""
Tests for parsing/extractors.py - entity recognisers
"""

import pytest

from quickdate.parsing.extractors import (
    parse_amount_duration,
    parse_day_certain,
    parse_day_or_month,
    parse_maybe_ymd,
    parse_month_certain,
    parse_month_partial,
    parse_ordinal_duration,
    parse_ordinal_weekday,
    parse_sole_amount,
    parse_weekday_partial,
    parse_year,
    parse_ymd,
)

MONTHS = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

WEEKDAYS = {
    "monday": "mon", "mon": "mon",
    "tuesday": "tue", "tue": "tue", "tues": "tue",
    "wednesday": "wed", "wed": "wed",
    "thursday": "thu", "thu": "thu", "thur": "thu", "thurs": "thu",
    "friday": "fri", "fri": "fri",
    "saturday": "sat", "sat": "sat",
    "sunday": "sun", "sun": "sun",
}


class TestYear:
    """Tests for year recognition."""

    def test_year_with_span(self):
        """Test a four-digit year inside text."""
        year = parse_year("in 2026")
        assert year.value == 2026
        assert year.span == (3, 7)

    @pytest.mark.parametrize("text", ["1899", "3000", "20266", "hello"])
    def test_out_of_range(self, text):
        """Test only 1900-2999 are years."""
        assert parse_year(text) is None


class TestDays:
    """Tests for day recognition."""

    @pytest.mark.parametrize("text,value", [
        ("3rd", 3),
        ("third", 3),
        ("the 15", 15),
        ("31st", 31),
        ("twelfth", 12),
        ("1st", 1),
    ])
    def test_day_certain(self, text, value):
        """Test ordinals and bare 13-31 are certain days."""
        assert parse_day_certain(text).value == value

    @pytest.mark.parametrize("text", ["5", "12", "32"])
    def test_day_certain_excludes_month_numbers(self, text):
        """Test bare 1-12 and out-of-range numbers are not certain days."""
        assert parse_day_certain(text) is None

    @pytest.mark.parametrize("text,value", [("7", 7), ("07", 7), ("12", 12)])
    def test_day_or_month(self, text, value):
        """Test bare 1-12 numbers."""
        assert parse_day_or_month(text).value == value

    def test_day_or_month_excludes_larger(self):
        """Test 13 is not a day-or-month."""
        assert parse_day_or_month("13") is None


class TestMonths:
    """Tests for month-name recognition."""

    @pytest.mark.parametrize("value,name", list(enumerate(MONTHS, start=1)))
    def test_every_prefix_of_every_month(self, value, name):
        """Test each month name and each prefix of at least three letters."""
        for n in range(3, len(name) + 1):
            month = parse_month_certain(name[:n])
            assert month is not None, name[:n]
            assert month.value == value, name[:n]

    def test_month_in_text(self):
        """Test the span of a month inside text."""
        month = parse_month_certain("due sept 3")
        assert month.value == 9
        assert month.span == (4, 8)

    def test_case_insensitive(self):
        """Test capitalised names are recognised."""
        assert parse_month_certain("March").value == 3

    @pytest.mark.parametrize("text,values", [
        ("j", [1, 6, 7]),
        ("ja", [1]),
        ("ju", [6, 7]),
        ("ma", [3, 5]),
        ("m", [3, 5]),
        ("a", [4, 8]),
        ("d", [12]),
        ("5 m", [3, 5]),
    ])
    def test_partial_prefixes(self, text, values):
        """Test ambiguous short prefixes widen to candidate lists."""
        partial = parse_month_partial(text)
        assert [c.value for c in partial.candidates] == values

    def test_partial_only_at_end(self):
        """Test a prefix must end the input."""
        assert parse_month_partial("ma 5") is None


class TestWeekdays:
    """Tests for weekday and ordinal+weekday recognition."""

    @pytest.mark.parametrize("text,value", list(WEEKDAYS.items()))
    def test_names_and_abbreviations(self, text, value):
        """Test full names and abbreviations."""
        found = parse_ordinal_weekday(text)
        assert found.weekday.value == value
        assert found.ordinal is None

    def test_ordinal_weekday(self):
        """Test "2nd friday"."""
        found = parse_ordinal_weekday("2nd friday")
        assert found.ordinal.value == 2
        assert found.weekday.value == "fri"
        assert found.ordinal.span == (0, 3)
        assert found.weekday.span == (4, 10)
        assert found.span == (0, 10)

    def test_ordinal_word_weekday(self):
        """Test "third monday"."""
        found = parse_ordinal_weekday("the third monday")
        assert found.ordinal.value == 3
        assert found.weekday.value == "mon"

    def test_bare_weekday(self):
        """Test "friday" has no ordinal."""
        found = parse_ordinal_weekday("friday")
        assert found.ordinal is None
        assert found.weekday.value == "fri"

    def test_weekday_partial(self):
        """Test "t" yields tuesday and thursday."""
        partial = parse_weekday_partial("t")
        assert [c.value for c in partial.candidates] == ["tue", "thu"]

    def test_weekday_partial_unique(self):
        """Test "fr" yields friday only."""
        partial = parse_weekday_partial(" fr")
        assert [c.value for c in partial.candidates] == ["fri"]

    def test_weekday_partial_requires_whole_input(self):
        """Test a prefix with other text around it is not partial."""
        assert parse_weekday_partial("march t") is None


class TestOrdinalDuration:
    """Tests for ordinal+duration recognition."""

    def test_ordinal_week(self):
        """Test "3rd week"."""
        found = parse_ordinal_duration("3rd week")
        assert found.ordinal.value == 3
        assert found.duration.value == "week"
        assert found.span == (0, 8)

    def test_ordinal_word_month(self):
        """Test "second month"."""
        found = parse_ordinal_duration("second month")
        assert found.ordinal.value == 2
        assert found.duration.value == "month"

    def test_requires_ordinal(self):
        """Test a cardinal amount is not an ordinal."""
        assert parse_ordinal_duration("2 weeks") is None


class TestAmountDuration:
    """Tests for amount+duration sequences."""

    def test_sequence_with_past(self):
        """Test "2 weeks and 3 days ago"."""
        found = parse_amount_duration("2 weeks and 3 days ago")
        assert [(t.amount.value, t.duration.value) for t in found.terms] == [(2, "week"), (3, "day")]
        assert found.past is True
        assert found.span == (0, 22)

    def test_future_without_indicator(self):
        """Test absence of a past word means future."""
        found = parse_amount_duration("in 3 days")
        assert found.past is False
        assert found.span == (3, 9)

    @pytest.mark.parametrize("word", ["ago", "before", "earlier", "bef"])
    def test_past_indicators(self, word):
        """Test every past indicator."""
        assert parse_amount_duration(f"5 days {word}").past is True

    def test_cardinal_words(self):
        """Test "a week" and "three months"."""
        assert [(t.amount.value, t.duration.value) for t in parse_amount_duration("a week").terms] == [(1, "week")]
        assert parse_amount_duration("three months").terms[0].amount.value == 3

    def test_abbreviations(self):
        """Test short unit spellings."""
        found = parse_amount_duration("2y 3mths 4wks 5d")
        assert [t.duration.value for t in found.terms] == ["year", "month", "week", "day"]

    def test_bare_m_keeps_its_label(self):
        """Test the single letter m is a month with its own label."""
        found = parse_amount_duration("5 m")
        assert found.terms[0].duration.value == "month"
        assert found.terms[0].duration.label == "m"

    @pytest.mark.parametrize("text", ["1000 weeks", "1000 months", "100 years", "10000 days"])
    def test_out_of_bounds_not_consumed(self, text):
        """Test amounts over the unit limit are rejected."""
        assert parse_amount_duration(text) is None

    def test_upper_bounds_accepted(self):
        """Test the limits themselves are accepted."""
        assert parse_amount_duration("9999 days").terms[0].amount.value == 9999
        assert parse_amount_duration("99 years").terms[0].amount.value == 99

    def test_truncates_at_out_of_bounds_term(self):
        """Test consumed terms are kept when a later term is out of bounds."""
        found = parse_amount_duration("2 weeks and 1000 weeks")
        assert [(t.amount.value, t.duration.value) for t in found.terms] == [(2, "week")]
        assert found.span == (0, 7)

    def test_at_most_six_terms(self):
        """Test consumption stops after six terms."""
        found = parse_amount_duration("1 d 1 d 1 d 1 d 1 d 1 d 1 d")
        assert len(found.terms) == 6

    def test_no_amount(self):
        """Test text without any amount."""
        assert parse_amount_duration("hello world") is None


class TestSoleAmount:
    """Tests for a lone number."""

    @pytest.mark.parametrize("text,value", [("3", 3), (" 42 ", 42), ("999", 999), ("seven", 7)])
    def test_sole_amount(self, text, value):
        """Test numbers up to 999 and cardinal words."""
        assert parse_sole_amount(text).value == value

    @pytest.mark.parametrize("text", ["1000", "0", "3 days"])
    def test_not_sole_amount(self, text):
        """Test larger numbers, zero, and anything else."""
        assert parse_sole_amount(text) is None


class TestParseYMD:
    """Tests for year-month-day disambiguation."""

    def test_month_name_and_number(self):
        """Test "march 3"."""
        ymd = parse_ymd("march 3")
        assert (ymd.month.value, ymd.day.value) == (3, 3)
        assert ymd.year is None
        assert ymd.span == (0, 7)

    def test_ordinal_of_month(self):
        """Test "3rd of march"."""
        ymd = parse_ymd("3rd of march")
        assert (ymd.month.value, ymd.day.value) == (3, 3)

    def test_with_year(self):
        """Test "jan 15 2026"."""
        ymd = parse_ymd("jan 15 2026")
        assert (ymd.year.value, ymd.month.value, ymd.day.value) == (2026, 1, 15)
        assert ymd.span == (0, 11)

    def test_certain_day_with_bare_number(self):
        """Test "13 4": the certain day leaves the month to the bare number."""
        ymd = parse_ymd("13 4")
        assert (ymd.month.value, ymd.day.value) == (4, 13)

    def test_year_first_bare_pair(self):
        """Test "2026 3 4" reads year, month, day."""
        ymd = parse_ymd("2026 3 4")
        assert (ymd.year.value, ymd.month.value, ymd.day.value) == (2026, 3, 4)
        assert ymd.span == (0, 8)

    def test_bare_pair_without_year(self):
        """Test "3 4" reads day then month."""
        ymd = parse_ymd("3 4")
        assert (ymd.month.value, ymd.day.value) == (4, 3)

    def test_year_last_bare_pair(self):
        """Test "3 4 2026" reads day, month, year."""
        ymd = parse_ymd("3 4 2026")
        assert (ymd.year.value, ymd.month.value, ymd.day.value) == (2026, 4, 3)

    def test_year_between_bare_pair_is_unresolved(self):
        """Test a year between the two numbers gives no reading."""
        assert parse_ymd("3 2026 4") is None

    def test_single_bare_number(self):
        """Test one bare number is not enough."""
        assert parse_ymd("3") is None


class TestMaybeYMD:
    """Tests for best-effort trailing text."""

    def test_day_and_partial_month(self):
        """Test "5 m" keeps the day and widens the month."""
        maybe = parse_maybe_ymd("5 m")
        assert maybe.day.value == 5
        assert [c.value for c in maybe.months] == [3, 5]

    def test_year_and_number(self):
        """Test "2026 3" reads the number as a month."""
        maybe = parse_maybe_ymd("2026 3")
        assert maybe.year.value == 2026
        assert [c.value for c in maybe.months] == [3]

    def test_day_only(self):
        """Test a bare day."""
        maybe = parse_maybe_ymd("20")
        assert maybe.day.value == 20
        assert maybe.months is None

    def test_nothing(self):
        """Test unrelated text."""
        assert parse_maybe_ymd("hello") is None


class TestOrdinalDigits:
    """Tests for the digit form of ordinals."""

    def test_three_digits(self):
        assert parse_ordinal_duration("999th week").ordinal.value == 999

    def test_four_digits_rejected(self):
        """Test ordinals are limited to three digits."""
        assert parse_ordinal_duration("1000th week") is None
        assert parse_ordinal_weekday("1000th friday").ordinal is None
