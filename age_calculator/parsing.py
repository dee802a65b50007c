"""Turn user-supplied date strings into ``datetime.date`` values.

Validation runs in a fixed order: type, length, ISO format, then the allowed
range.  Every failure raises ``InvalidInput`` whose message names the field,
so front ends can show it as-is.
"""

import datetime
import re

from age_calculator.engine import InvalidInput

MAX_DATE_LEN: int = 10
MIN_DATE: datetime.date = datetime.date(1900, 1, 1)
MAX_DATE: datetime.date = datetime.date(2100, 12, 31)

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(raw: str, field_name: str = "date") -> datetime.date:
    """Parse a ``YYYY-MM-DD`` string.

    Args:
        raw: The text to parse.  Surrounding whitespace is ignored.
        field_name: Name used in error messages (e.g. ``"birth_date"``).

    Returns:
        The parsed date.

    Raises:
        InvalidInput: If ``raw`` is not a string, is too long, is not a valid
            ISO calendar date, or falls outside 1900-01-01 to 2100-12-31.
    """
    if not isinstance(raw, str):
        raise InvalidInput(f"{field_name} must be a string.")

    value = raw.strip()
    if len(value) > MAX_DATE_LEN:
        raise InvalidInput(f"{field_name} exceeds maximum length of {MAX_DATE_LEN}.")

    # fromisoformat also accepts compact and week-date forms on 3.11+.
    if not _ISO_DATE_RE.match(value):
        raise InvalidInput(f"{field_name} is not a valid ISO date (YYYY-MM-DD).")
    try:
        parsed = datetime.date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidInput(f"{field_name} is not a valid ISO date (YYYY-MM-DD).") from exc

    if not (MIN_DATE <= parsed <= MAX_DATE):
        raise InvalidInput(
            f"{field_name} is outside the allowed range "
            f"({MIN_DATE.isoformat()} to {MAX_DATE.isoformat()})."
        )
    return parsed
