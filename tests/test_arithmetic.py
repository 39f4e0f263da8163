"""
Tests for parsing/arithmetic.py - date differences
"""

from datetime import date

from quickdate.parsing.arithmetic import day_diff, month_diff_rough, week_diff_solid, year_diff_rough

TODAY = date(2025, 1, 15)


class TestYearDiff:
    """Tests for rough year differences."""

    def test_half_year_rounds_up(self):
        """Test half a year ahead counts as one year."""
        assert year_diff_rough(date(2025, 7, 1), TODAY) == (1, False)

    def test_past_half_rounds_towards_future(self):
        """Test 4.5 years back rounds to 4."""
        assert year_diff_rough(date(2020, 7, 1), TODAY) == (4, True)

    def test_same_year(self):
        """Test a date in the same month is zero years away."""
        assert year_diff_rough(date(2025, 1, 30), TODAY) == (0, False)


class TestMonthDiff:
    """Tests for rough month differences."""

    def test_whole_months(self):
        """Test two months ahead."""
        assert month_diff_rough(date(2025, 3, 15), TODAY) == (2, False)

    def test_across_years(self):
        """Test month arithmetic across a year boundary."""
        assert month_diff_rough(date(2024, 11, 15), TODAY) == (2, True)

    def test_day_fraction(self):
        """Test the day difference contributes a fraction of a month."""
        assert month_diff_rough(date(2025, 1, 1), date(2025, 1, 20)) == (1, True)
        assert month_diff_rough(date(2025, 1, 20), TODAY) == (0, False)


class TestWeekDiff:
    """Tests for whole-week differences."""

    def test_exact_weeks(self):
        """Test an exact two-week distance."""
        assert week_diff_solid(date(2025, 1, 29), TODAY) == (2, False, True)

    def test_partial_weeks(self):
        """Test a distance just over two weeks."""
        assert week_diff_solid(date(2025, 1, 30), TODAY) == (2, False, False)

    def test_past_weeks(self):
        """Test a distance into the past."""
        assert week_diff_solid(date(2025, 1, 1), TODAY) == (2, True, True)


class TestDayDiff:
    """Tests for day differences."""

    def test_future(self):
        assert day_diff(date(2025, 1, 20), TODAY) == (5, False)

    def test_past(self):
        assert day_diff(date(2025, 1, 12), TODAY) == (3, True)

    def test_same_day(self):
        assert day_diff(TODAY, TODAY) == (0, False)
