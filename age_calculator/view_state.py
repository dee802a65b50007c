"""Immutable view state for graphical front ends.

A front end holds one ``ViewState`` and replaces it with
``reduce(state, event)`` whenever the user acts.  Nothing here is mutated in
place and nothing here depends on a UI toolkit; widgets read the state and
map ``report.zodiac.icon_key`` to their own glyphs.
"""

import datetime
from dataclasses import dataclass, replace

from age_calculator.engine import InvalidInput
from age_calculator.report import AgeReport, build_report, format_display_date

EMPTY_RESULT_TEXT: str = "Select a birthdate to see results."
INVALID_BIRTHDATE_MESSAGE: str = "Invalid birthdate. Please ensure the date is in the past."


@dataclass(frozen=True)
class ViewState:
    """Everything a front end needs to draw the calculator screen."""

    selected_date: datetime.date | None = None
    report: AgeReport | None = None
    abbreviate: bool = False
    dark_mode: bool = False
    message: str | None = None  # transient notice, e.g. a snackbar
    error: str | None = None


@dataclass(frozen=True)
class DateSelected:
    date: datetime.date
    reference_date: datetime.date | None = None


@dataclass(frozen=True)
class AbbreviateToggled:
    value: bool


@dataclass(frozen=True)
class DarkModeToggled:
    value: bool


@dataclass(frozen=True)
class Cleared:
    pass


ViewEvent = DateSelected | AbbreviateToggled | DarkModeToggled | Cleared


def _select_date(state: ViewState, event: DateSelected) -> ViewState:
    try:
        report = build_report(event.date, event.reference_date)
    except InvalidInput:
        return replace(
            state,
            selected_date=event.date,
            report=None,
            message=None,
            error=INVALID_BIRTHDATE_MESSAGE,
        )
    return replace(
        state,
        selected_date=event.date,
        report=report,
        message="Birthdate selected successfully!",
        error=None,
    )


def reduce(state: ViewState, event: ViewEvent) -> ViewState:
    """Return the state that follows ``event``.

    Raises:
        TypeError: If ``event`` is not one of the known view events.
    """
    if isinstance(event, DateSelected):
        return _select_date(state, event)
    if isinstance(event, AbbreviateToggled):
        return replace(state, abbreviate=event.value, message=None)
    if isinstance(event, DarkModeToggled):
        return replace(state, dark_mode=event.value, message=None)
    if isinstance(event, Cleared):
        return ViewState(dark_mode=state.dark_mode, message="Selection cleared.")
    raise TypeError(f"Unknown view event: {event!r}")


def result_text(state: ViewState) -> str:
    """Render the result panel text for ``state``."""
    if state.error:
        return f"Error: {state.error}"
    if state.report is None:
        return EMPTY_RESULT_TEXT

    report = state.report
    lines = [
        f"Age: {report.age.formatted(abbreviate=state.abbreviate)}",
        f"Total months: {report.total_months}",
        f"Approximate total days: {report.approximate_total_days}",
    ]
    if report.is_leap_year_baby:
        lines.append("You are a leap year baby!")
    lines.append(f"Next birthday: {format_display_date(report.next_birthday)}")
    lines.append(f"Days until next birthday: {report.days_until_next_birthday}")
    return "\n".join(lines)
