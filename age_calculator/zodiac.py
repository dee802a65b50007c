"""Western tropical zodiac lookup.

Each sign owns one inclusive date range.  The result carries a symbolic
``ZodiacIcon`` key rather than a rendered glyph; presentation code decides
how to draw it (see ``age_calculator.report.describe_icon``).
"""

import datetime
from dataclasses import dataclass
from enum import Enum


class ZodiacIcon(str, Enum):
    """Symbolic icon keys, one per sign."""

    FIRE = "fire"
    LEAF = "leaf"
    SPEECH_BUBBLE = "speech_bubble"
    HOME = "home"
    STAR = "star"
    TOOLS = "tools"
    SCALES = "scales"
    SCORPION = "scorpion"
    COMPASS = "compass"
    BRIEFCASE = "briefcase"
    WAVES = "waves"
    WATER_DROPLET = "water_droplet"


@dataclass(frozen=True)
class ZodiacResult:
    sign: str
    description: str
    icon_key: ZodiacIcon


@dataclass(frozen=True)
class _SignRange:
    result: ZodiacResult
    start: tuple[int, int]  # (month, day), inclusive
    end: tuple[int, int]    # (month, day), inclusive

    def contains(self, month: int, day: int) -> bool:
        (start_month, start_day), (end_month, end_day) = self.start, self.end
        return (month == start_month and day >= start_day) or (month == end_month and day <= end_day)


ZODIAC_SIGNS: tuple[_SignRange, ...] = (
    _SignRange(ZodiacResult("Aries", "Bold and ambitious", ZodiacIcon.FIRE), (3, 21), (4, 19)),
    _SignRange(ZodiacResult("Taurus", "Reliable and patient", ZodiacIcon.LEAF), (4, 20), (5, 20)),
    _SignRange(ZodiacResult("Gemini", "Versatile and curious", ZodiacIcon.SPEECH_BUBBLE), (5, 21), (6, 20)),
    _SignRange(ZodiacResult("Cancer", "Intuitive and caring", ZodiacIcon.HOME), (6, 21), (7, 22)),
    _SignRange(ZodiacResult("Leo", "Confident and charismatic", ZodiacIcon.STAR), (7, 23), (8, 22)),
    _SignRange(ZodiacResult("Virgo", "Analytical and practical", ZodiacIcon.TOOLS), (8, 23), (9, 22)),
    _SignRange(ZodiacResult("Libra", "Balanced and diplomatic", ZodiacIcon.SCALES), (9, 23), (10, 22)),
    _SignRange(ZodiacResult("Scorpio", "Passionate and resourceful", ZodiacIcon.SCORPION), (10, 23), (11, 21)),
    _SignRange(ZodiacResult("Sagittarius", "Adventurous and optimistic", ZodiacIcon.COMPASS), (11, 22), (12, 21)),
    _SignRange(ZodiacResult("Capricorn", "Disciplined and ambitious", ZodiacIcon.BRIEFCASE), (12, 22), (1, 19)),
    _SignRange(ZodiacResult("Aquarius", "Innovative and independent", ZodiacIcon.WAVES), (1, 20), (2, 18)),
    _SignRange(ZodiacResult("Pisces", "Compassionate and imaginative", ZodiacIcon.WATER_DROPLET), (2, 19), (3, 20)),
)


def get_zodiac_sign(birth_date: datetime.date) -> ZodiacResult:
    """Return the zodiac sign for ``birth_date``.

    Only month and day matter.  Pisces covers whatever the other eleven
    ranges leave, so every valid date maps to exactly one sign.
    """
    for sign_range in ZODIAC_SIGNS[:-1]:
        if sign_range.contains(birth_date.month, birth_date.day):
            return sign_range.result
    return ZODIAC_SIGNS[-1].result
