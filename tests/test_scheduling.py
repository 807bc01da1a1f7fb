"""Tests for scheduling calculators."""

import pytest


class TestOptimalStart:

    @pytest.mark.parametrize("mass,minutes", [("light", "30"), ("medium", "50"), ("heavy", "80")])
    def test_factor_by_mass(self, calc, mass, minutes):
        result = calc("optimal_start", delta_t="10", thermal_mass=mass)
        assert result.value("lead_time") == minutes
        assert result.output("lead_time").unit == "minutes"

    def test_fractional_lead_time(self, calc):
        result = calc("optimal_start", delta_t="2.5", thermal_mass="light")
        assert result.value("lead_time") == "7.5"

    def test_unknown_mass_blank(self, calc):
        assert calc("optimal_start", delta_t="10", thermal_mass="concrete").is_blank


class TestOptimalStop:

    def test_stop_time(self, calc):
        result = calc("optimal_stop", coast_minutes="30", occupancy_end="17:00")
        assert result.value("stop_time") == "16:30"

    def test_wraps_past_midnight(self, calc):
        result = calc("optimal_stop", coast_minutes="30", occupancy_end="00:10")
        assert result.value("stop_time") == "23:40"

    def test_invalid_time_blank(self, calc):
        assert calc("optimal_stop", coast_minutes="30", occupancy_end="5pm").is_blank


class TestHolidayDate:

    @pytest.mark.parametrize("month,nth,weekday,year,expected", [
        ("11", "4", "4", "2025", "November 27, 2025"),  # Thanksgiving
        ("9", "1", "1", "2025", "September 1, 2025"),   # Labor Day
        ("1", "3", "1", "2026", "January 19, 2026"),    # MLK Day
        ("5", "2", "0", "2024", "May 12, 2024"),        # Mother's Day
    ])
    def test_nth_weekday(self, calc, month, nth, weekday, year, expected):
        result = calc("holiday_date", month=month, nth=nth, weekday=weekday, year=year)
        assert result.value("date") == expected

    @pytest.mark.parametrize("year", ["0", "10000", "-5"])
    def test_year_out_of_range_blank(self, calc, year):
        assert calc("holiday_date", month="11", nth="4", weekday="4", year=year).is_blank

    def test_unknown_month_blank(self, calc):
        assert calc("holiday_date", month="13", nth="1", weekday="1", year="2025").is_blank


class TestOccupiedHours:

    def test_weekday_schedule(self, calc):
        result = calc("occupied_hours", start="07:00", end="18:00", days_per_week="5")
        assert result.value("hours_per_year") == "2860"

    def test_overnight_schedule(self, calc):
        result = calc("occupied_hours", start="22:00", end="06:00", days_per_week="7")
        assert result.value("hours_per_year") == "2912"

    def test_invalid_time_blank(self, calc):
        assert calc("occupied_hours", start="7am", end="18:00", days_per_week="5").is_blank


class TestTrendSampleRate:

    @pytest.mark.parametrize("process,interval", [
        ("temperature", "5-15 min (slow thermal mass)"),
        ("status", "1 min or COV (binary states)"),
        ("power", "15 min (energy totalization)"),
    ])
    def test_recommendation(self, calc, process, interval):
        assert calc("trend_sample_rate", process=process).value("interval") == interval

    def test_unknown_process_blank(self, calc):
        assert calc("trend_sample_rate", process="vibration").is_blank
