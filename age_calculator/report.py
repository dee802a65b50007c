"""Aggregate every derived fact about a birth date and render it as text.

``build_report`` resolves the reference date once, so the age, next
birthday, and countdown in one report always agree with each other.
"""

import datetime
from dataclasses import dataclass

from age_calculator.engine import (
    Age,
    compute_age,
    days_until_next_birthday,
    is_leap_year_baby,
    next_birthday,
)
from age_calculator.zodiac import ZodiacIcon, ZodiacResult, get_zodiac_sign

ICON_DESCRIPTIONS: dict[ZodiacIcon, str] = {
    ZodiacIcon.FIRE: "Fire",
    ZodiacIcon.LEAF: "Leaf",
    ZodiacIcon.SPEECH_BUBBLE: "Speech Bubble",
    ZodiacIcon.HOME: "Home",
    ZodiacIcon.STAR: "Star",
    ZodiacIcon.TOOLS: "Tools",
    ZodiacIcon.SCALES: "Scales",
    ZodiacIcon.SCORPION: "Scorpion",
    ZodiacIcon.COMPASS: "Compass",
    ZodiacIcon.BRIEFCASE: "Briefcase",
    ZodiacIcon.WAVES: "Waves",
    ZodiacIcon.WATER_DROPLET: "Water Droplet",
}


@dataclass(frozen=True)
class AgeReport:
    birth_date: datetime.date
    reference_date: datetime.date
    age: Age
    is_leap_year_baby: bool
    next_birthday: datetime.date
    days_until_next_birthday: int
    zodiac: ZodiacResult

    @property
    def age_in_years(self) -> int:
        return self.age.years

    @property
    def total_months(self) -> int:
        return self.age.total_months

    @property
    def approximate_total_days(self) -> int:
        return self.age.approximate_total_days


def build_report(
    birth_date: datetime.date,
    reference_date: datetime.date | None = None,
) -> AgeReport:
    """Compute the full report for ``birth_date`` at ``reference_date`` (default today).

    Raises:
        InvalidInput: If ``birth_date`` is after the reference date.
    """
    reference = reference_date or datetime.date.today()
    if isinstance(reference, datetime.datetime):
        reference = reference.date()
    if isinstance(birth_date, datetime.datetime):
        birth_date = birth_date.date()

    return AgeReport(
        birth_date=birth_date,
        reference_date=reference,
        age=compute_age(birth_date, reference),
        is_leap_year_baby=is_leap_year_baby(birth_date),
        next_birthday=next_birthday(birth_date, reference),
        days_until_next_birthday=days_until_next_birthday(birth_date, reference),
        zodiac=get_zodiac_sign(birth_date),
    )


def format_display_date(value: datetime.date) -> str:
    """Format a date as ``Mar 10, 2025``."""
    return f"{value:%b} {value.day}, {value.year}"


def describe_icon(icon_key: ZodiacIcon | str) -> str:
    """Map a symbolic icon key to a human-readable glyph name."""
    try:
        return ICON_DESCRIPTIONS[ZodiacIcon(icon_key)]
    except ValueError:
        return "Unknown Icon"


def render_report(report: AgeReport, abbreviate: bool = False) -> list[str]:
    """Return the report as display lines, primary age format first."""
    primary = report.age.formatted(abbreviate=abbreviate)
    secondary = report.age.formatted(abbreviate=not abbreviate)
    lines = [
        f"Age: {primary}",
        f"{'Full' if abbreviate else 'Abbreviated'}: {secondary}",
        f"Age (years only): {report.age_in_years} years",
        f"Total months: {report.total_months}",
        f"Approximate total days: {report.approximate_total_days}",
    ]
    if report.is_leap_year_baby:
        lines.append("You are a leap year baby!")
    lines.extend(
        [
            f"Next birthday: {format_display_date(report.next_birthday)}",
            f"Days until next birthday: {report.days_until_next_birthday}",
            f"Zodiac sign: {report.zodiac.sign} ({report.zodiac.description})",
            f"Zodiac icon: {describe_icon(report.zodiac.icon_key)}",
        ]
    )
    return lines
