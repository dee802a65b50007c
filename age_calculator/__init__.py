"""age_calculator: age, birthday, and zodiac arithmetic with a Strands agent front end.

Public API
----------
compute_age, age_in_years, total_months, approximate_total_days
    Break an age down into years, months, and days.
next_birthday, days_until_next_birthday
    Birthday countdowns.
is_leap_year, is_leap_year_baby
    Leap-year checks.
get_zodiac_sign
    Western zodiac lookup returning a ``ZodiacResult``.
build_report
    Every derived fact for one birth date in a single ``AgeReport``.
create_agent
    Factory function that builds and returns a configured ``strands.Agent``.

Example
-------
>>> import datetime
>>> from age_calculator import compute_age
>>> compute_age(datetime.date(1990, 5, 15), datetime.date(2024, 5, 14)).formatted()
'33 years, 11 months, 29 days'
"""

from age_calculator.agent import create_agent
from age_calculator.engine import (
    Age,
    InvalidInput,
    age_in_years,
    approximate_total_days,
    compute_age,
    days_until_next_birthday,
    is_leap_year,
    is_leap_year_baby,
    next_birthday,
    total_months,
)
from age_calculator.parsing import parse_date
from age_calculator.report import AgeReport, build_report
from age_calculator.zodiac import ZodiacIcon, ZodiacResult, get_zodiac_sign

__all__: list[str] = [
    "Age",
    "AgeReport",
    "InvalidInput",
    "ZodiacIcon",
    "ZodiacResult",
    "age_in_years",
    "approximate_total_days",
    "build_report",
    "compute_age",
    "create_agent",
    "days_until_next_birthday",
    "get_zodiac_sign",
    "is_leap_year",
    "is_leap_year_baby",
    "next_birthday",
    "parse_date",
    "total_months",
]
