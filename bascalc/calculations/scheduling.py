# -*- coding: utf-8 -*-
"""
Scheduling Calculators

- Optimal start lead time
- Optimal stop (coast-down) time
- Nth-weekday holiday dates
- Annual occupied hours
- Trend sample rate recommendations
"""

import calendar
import datetime
from typing import Dict

from bascalc.calculation.fields import NumberInput, OutputField, SelectInput, TimeInput
from bascalc.calculation.formatting import plain_number
from bascalc.calculation.registry import Category, calculator

MINUTES_PER_DAY = 24 * 60
WEEKS_PER_YEAR = 52

# Minutes of lead time per degree F of recovery
THERMAL_MASS_FACTORS: Dict[str, float] = {
    "light": 3,
    "medium": 5,
    "heavy": 8,
}

MONTHS = {str(number): calendar.month_name[number] for number in range(1, 13)}
ORDINALS = {"1": "First", "2": "Second", "3": "Third", "4": "Fourth"}
# Sunday-first numbering, as building schedules are entered
WEEKDAYS = {
    "0": "Sunday",
    "1": "Monday",
    "2": "Tuesday",
    "3": "Wednesday",
    "4": "Thursday",
    "5": "Friday",
    "6": "Saturday",
}

TREND_RECOMMENDATIONS: Dict[str, str] = {
    "temperature": "5-15 min (slow thermal mass)",
    "pressure": "1-5 min (moderate dynamics)",
    "flow": "1-5 min (moderate dynamics)",
    "status": "1 min or COV (binary states)",
    "power": "15 min (energy totalization)",
    "humidity": "5-15 min (slow response)",
}


@calculator(
    "optimal_start",
    title="Optimal Start Time",
    category=Category.SCHEDULING,
    inputs=[
        NumberInput("delta_t", "Temperature Difference", "°F", default="10"),
        SelectInput("thermal_mass", "Building Mass",
                    options={"light": "Light", "medium": "Medium", "heavy": "Heavy"},
                    default="medium"),
    ],
    outputs=[OutputField("lead_time", "Start Lead Time", "minutes")],
)
def optimal_start(delta_t, thermal_mass):
    return {"lead_time": plain_number(delta_t * THERMAL_MASS_FACTORS[thermal_mass])}


@calculator(
    "optimal_stop",
    title="Optimal Stop Time",
    category=Category.SCHEDULING,
    inputs=[
        NumberInput("coast_minutes", "Coast Time", "min", default="30", integer=True),
        TimeInput("occupancy_end", "Occupancy End", default="17:00"),
    ],
    outputs=[OutputField("stop_time", "Stop Equipment At")],
)
def optimal_stop(coast_minutes, occupancy_end):
    """Occupancy end less the coast time, wrapped into a single day."""
    stop = int(occupancy_end - coast_minutes) % MINUTES_PER_DAY
    hours, minutes = divmod(stop, 60)
    return {"stop_time": f"{hours:02d}:{minutes:02d}"}


@calculator(
    "holiday_date",
    title="Holiday Date (nth Weekday)",
    category=Category.SCHEDULING,
    inputs=[
        SelectInput("month", "Month", options=MONTHS, default="11"),
        SelectInput("nth", "Occurrence", options=ORDINALS, default="4"),
        SelectInput("weekday", "Day of Week", options=WEEKDAYS, default="4"),
        NumberInput("year", "Year", default="2025", integer=True),
    ],
    outputs=[OutputField("date", "Date")],
)
def holiday_date(month, nth, weekday, year):
    """
    Date of the nth given weekday in a month, e.g. the fourth Thursday
    of November. Every weekday occurs at least four times in a month,
    so occurrences 1-4 always resolve.
    """
    year = int(year)
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        return {}
    month = int(month)
    # datetime numbers Monday as 0
    target = (int(weekday) + 6) % 7
    first = datetime.date(year, month, 1)
    offset = (target - first.weekday()) % 7
    day = 1 + offset + (int(nth) - 1) * 7
    return {"date": f"{calendar.month_name[month]} {day}, {year}"}


@calculator(
    "occupied_hours",
    title="Occupied Hours per Year",
    category=Category.SCHEDULING,
    inputs=[
        TimeInput("start", "Occupancy Start", default="07:00"),
        TimeInput("end", "Occupancy End", default="18:00"),
        NumberInput("days_per_week", "Days per Week", default="5", integer=True),
    ],
    outputs=[OutputField("hours_per_year", "Annual Hours", "hrs", decimals=0)],
)
def occupied_hours(start, end, days_per_week):
    span = end - start
    if span < 0:
        # overnight occupancy
        span += MINUTES_PER_DAY
    return {"hours_per_year": span / 60 * days_per_week * WEEKS_PER_YEAR}


@calculator(
    "trend_sample_rate",
    title="Trend Sample Rate",
    category=Category.SCHEDULING,
    inputs=[
        SelectInput("process", "Process Type",
                    options={key: key.capitalize() for key in TREND_RECOMMENDATIONS},
                    default="temperature"),
    ],
    outputs=[OutputField("interval", "Recommended Interval")],
)
def trend_sample_rate(process):
    return {"interval": TREND_RECOMMENDATIONS[process]}
