"""Calendar arithmetic behind every age calculation.

All functions here are pure: they take calendar dates, return values, and
never log, print, or touch shared state.  A ``datetime.datetime`` is accepted
wherever a date is expected; only its calendar date is used.

When a reference date is omitted it defaults to ``datetime.date.today()``,
resolved once per call.
"""

import calendar
import datetime
from dataclasses import dataclass


class InvalidInput(ValueError):
    """Raised when a birth date is after its reference date or a date string cannot be parsed."""


@dataclass(frozen=True)
class Age:
    """A person's age broken down into whole years, months, and days.

    Attributes:
        years: Completed years, never negative.
        months: Completed months after the last whole year, 0 to 11.
        days: Remaining days after the last whole month, 0 to 30.
    """

    years: int
    months: int
    days: int

    def __post_init__(self) -> None:
        if self.years < 0:
            raise InvalidInput(f"years must be non-negative, got {self.years}.")
        if not 0 <= self.months <= 11:
            raise InvalidInput(f"months must be between 0 and 11, got {self.months}.")
        if not 0 <= self.days <= 30:
            raise InvalidInput(f"days must be between 0 and 30, got {self.days}.")

    def __str__(self) -> str:
        return self.formatted()

    @property
    def total_months(self) -> int:
        return total_months(self)

    @property
    def approximate_total_days(self) -> int:
        return approximate_total_days(self)

    def formatted(self, abbreviate: bool = False) -> str:
        """Render the age as ``"34y 0m 0d"`` or ``"34 years, 0 months, 0 days"``."""
        if abbreviate:
            return f"{self.years}y {self.months}m {self.days}d"
        return f"{self.years} years, {self.months} months, {self.days} days"


def _as_date(value: datetime.date) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def _resolve_reference(reference_date: datetime.date | None) -> datetime.date:
    if reference_date is None:
        return datetime.date.today()
    return _as_date(reference_date)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years (1900 is not one, 2000 is)."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_leap_year_baby(birth_date: datetime.date) -> bool:
    """Return True when the birth date falls on February 29."""
    return birth_date.month == 2 and birth_date.day == 29


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    ``month`` 0 is read as December of the previous year, so callers can ask
    for "the month before January" without special-casing the year boundary.
    """
    if month == 0:
        year, month = year - 1, 12
    return calendar.monthrange(year, month)[1]


def compute_age(
    birth_date: datetime.date,
    reference_date: datetime.date | None = None,
) -> Age:
    """Compute the age in years, months, and days at ``reference_date``.

    Components are subtracted field by field.  A negative day count borrows
    the length of the month preceding the reference month; a negative month
    count then borrows twelve months from the years.  If the borrowed day
    count is still negative (born on the 31st, measured on March 1st of a
    common year) the days counted are just those of the reference month.

    Args:
        birth_date: The date of birth.
        reference_date: The date to measure at.  Defaults to today.

    Returns:
        An ``Age``.  Equal dates yield ``Age(0, 0, 0)``.

    Raises:
        InvalidInput: If ``birth_date`` is strictly after ``reference_date``.
    """
    birth = _as_date(birth_date)
    reference = _resolve_reference(reference_date)

    if birth > reference:
        raise InvalidInput("Birthdate cannot be in the future.")

    years = reference.year - birth.year
    months = reference.month - birth.month
    days = reference.day - birth.day

    if days < 0:
        months -= 1
        days += days_in_month(reference.year, reference.month - 1)
        if days < 0:
            days = reference.day

    if months < 0:
        years -= 1
        months += 12

    return Age(years, months, days)


def age_in_years(
    birth_date: datetime.date,
    reference_date: datetime.date | None = None,
) -> int:
    """Return only the completed years of ``compute_age``."""
    return compute_age(birth_date, reference_date).years


def total_months(age: Age) -> int:
    return age.years * 12 + age.months


def approximate_total_days(age: Age) -> int:
    """Estimate the age in days assuming every month has 30 days.

    This is deliberately not a calendar-accurate count; use
    ``exact_days_between`` when the real number of days matters.
    """
    return total_months(age) * 30 + age.days


def exact_days_between(start_date: datetime.date, end_date: datetime.date) -> int:
    """Return the calendar-accurate number of days from ``start_date`` to ``end_date``.

    Raises:
        InvalidInput: If ``start_date`` is strictly after ``end_date``.
    """
    start = _as_date(start_date)
    end = _as_date(end_date)
    if start > end:
        raise InvalidInput(f"start_date {start.isoformat()} must not be after end_date {end.isoformat()}.")
    return (end - start).days


def _birthday_in(year: int, birth: datetime.date) -> datetime.date:
    # February 29 falls back to March 1 in common years.
    if is_leap_year_baby(birth) and not is_leap_year(year):
        return datetime.date(year, 3, 1)
    return datetime.date(year, birth.month, birth.day)


def next_birthday(
    birth_date: datetime.date,
    reference_date: datetime.date | None = None,
) -> datetime.date:
    """Return the first birthday strictly after ``reference_date``.

    A reference date that *is* the birthday counts as already passed, so the
    result moves to the following year.  People born on February 29 celebrate
    on March 1 in common years.

    Args:
        birth_date: The date of birth.
        reference_date: The date to search from.  Defaults to today.

    Returns:
        The date of the next birthday.
    """
    birth = _as_date(birth_date)
    reference = _resolve_reference(reference_date)

    candidate = _birthday_in(reference.year, birth)
    if candidate <= reference:
        candidate = _birthday_in(reference.year + 1, birth)
    return candidate


def days_until_next_birthday(
    birth_date: datetime.date,
    reference_date: datetime.date | None = None,
) -> int:
    """Return the whole days between ``reference_date`` and the next birthday.

    On the birthday itself the result is a full year (365 or 366), never 0,
    because ``next_birthday`` rolls an exact match forward.
    """
    reference = _resolve_reference(reference_date)
    return (next_birthday(birth_date, reference) - reference).days
