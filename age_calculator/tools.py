"""Strands tools that expose the age engine to the language model.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Every date argument is validated through
``parse_date`` before any computation so that the model receives a clear
error message naming the bad parameter rather than a cryptic traceback.
"""

import datetime
import logging

from strands import tool

from age_calculator.engine import (
    compute_age,
    days_until_next_birthday,
    exact_days_between,
    is_leap_year_baby,
    next_birthday,
)
from age_calculator.parsing import parse_date
from age_calculator.zodiac import get_zodiac_sign as lookup_zodiac_sign

logger: logging.Logger = logging.getLogger(__name__)


def _optional_reference(reference_date: str | None) -> datetime.date:
    if reference_date is None or not str(reference_date).strip():
        return datetime.date.today()
    return parse_date(reference_date, "reference_date")


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when you need to calculate
    someone's age or birthday countdown and the user did not give a
    reference date.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = datetime.date.today().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_days_between(start_date: str, end_date: str) -> int:
    """Calculate the exact number of calendar days between two dates.

    Use this tool when the user asks how many days old they are, or for the
    day count between any two dates.  The start date must be earlier than or
    equal to the end date.

    Args:
        start_date: The earlier date in YYYY-MM-DD format.
        end_date: The later date in YYYY-MM-DD format.

    Returns:
        The number of days between start_date and end_date as a
        non-negative integer.

    Raises:
        ValueError: If either date string is not in YYYY-MM-DD format, is
            outside 1900-01-01 to 2100-12-31, or if start_date is strictly
            after end_date.
    """
    # Log input lengths, not raw values.
    logger.debug(
        "calculate_days_between called with %d-char start_date, %d-char end_date",
        len(start_date) if isinstance(start_date, str) else -1,
        len(end_date) if isinstance(end_date, str) else -1,
    )
    start = parse_date(start_date, "start_date")
    end = parse_date(end_date, "end_date")

    days = exact_days_between(start, end)
    logger.debug("calculate_days_between result: %d days", days)
    return days


@tool
def calculate_age(birth_date: str, reference_date: str | None = None) -> dict:
    """Calculate a person's age in years, months, and days.

    Use this tool when the user asks how old they are.  Leave
    reference_date empty to measure against today.

    Args:
        birth_date: The date of birth in YYYY-MM-DD format.
        reference_date: Optional date to measure the age at, in YYYY-MM-DD
            format.  Defaults to today.

    Returns:
        A dict with years, months, days, total_months,
        approximate_total_days (assumes 30-day months), formatted,
        and is_leap_year_baby.

    Raises:
        ValueError: If a date is not in YYYY-MM-DD format, or if birth_date
            is after reference_date.
    """
    birth = parse_date(birth_date, "birth_date")
    reference = _optional_reference(reference_date)
    age = compute_age(birth, reference)
    logger.debug("calculate_age result: %s", age.formatted(abbreviate=True))
    return {
        "years": age.years,
        "months": age.months,
        "days": age.days,
        "total_months": age.total_months,
        "approximate_total_days": age.approximate_total_days,
        "formatted": age.formatted(),
        "is_leap_year_baby": is_leap_year_baby(birth),
    }


@tool
def get_next_birthday(birth_date: str, reference_date: str | None = None) -> dict:
    """Find the next birthday and how many days remain until it.

    Use this tool when the user asks when their next birthday is or how long
    until it.  If reference_date is the birthday itself, the following
    year's birthday is returned.  People born on February 29 celebrate on
    March 1 in common years.

    Args:
        birth_date: The date of birth in YYYY-MM-DD format.
        reference_date: Optional date to count from, in YYYY-MM-DD format.
            Defaults to today.

    Returns:
        A dict with next_birthday (YYYY-MM-DD) and days_until.

    Raises:
        ValueError: If a date is not in YYYY-MM-DD format.
    """
    birth = parse_date(birth_date, "birth_date")
    reference = _optional_reference(reference_date)
    upcoming = next_birthday(birth, reference)
    return {
        "next_birthday": upcoming.isoformat(),
        "days_until": days_until_next_birthday(birth, reference),
    }


@tool
def get_zodiac_sign(birth_date: str) -> dict:
    """Look up the Western zodiac sign for a birth date.

    Use this tool when the user asks for their star sign or zodiac sign.

    Args:
        birth_date: The date of birth in YYYY-MM-DD format.

    Returns:
        A dict with sign, description, and icon_key.

    Raises:
        ValueError: If birth_date is not in YYYY-MM-DD format.
    """
    birth = parse_date(birth_date, "birth_date")
    result = lookup_zodiac_sign(birth)
    return {
        "sign": result.sign,
        "description": result.description,
        "icon_key": result.icon_key.value,
    }
