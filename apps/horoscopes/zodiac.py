"""
Zodiac sign calculation.

Calculates zodiac sign from birthdate. No external API needed.
"""
from datetime import date, datetime
from typing import Dict, Optional, Union


class InvalidDateError(ValueError):
    """Raised when a birthdate cannot be parsed into a calendar date."""
    pass


ZODIAC_SIGN_NAMES = (
    'Aries', 'Taurus', 'Gemini', 'Cancer', 'Leo', 'Virgo',
    'Libra', 'Scorpio', 'Sagittarius', 'Capricorn', 'Aquarius', 'Pisces',
)

ZODIAC_CHOICES = [(sign, sign) for sign in ZODIAC_SIGN_NAMES]

# Each tuple: (sign_name, start_month, start_day, end_month, end_day)
# Start and end days are both inclusive.
ZODIAC_SIGNS = [
    ('Capricorn', 12, 22, 1, 19),
    ('Aquarius', 1, 20, 2, 18),
    ('Pisces', 2, 19, 3, 20),
    ('Aries', 3, 21, 4, 19),
    ('Taurus', 4, 20, 5, 20),
    ('Gemini', 5, 21, 6, 20),
    ('Cancer', 6, 21, 7, 22),
    ('Leo', 7, 23, 8, 22),
    ('Virgo', 8, 23, 9, 22),
    ('Libra', 9, 23, 10, 22),
    ('Scorpio', 10, 23, 11, 21),
    ('Sagittarius', 11, 22, 12, 21),
]

# Zodiac symbols/emojis
ZODIAC_SYMBOLS = {
    'Aries': '\u2648',  # ♈
    'Taurus': '\u2649',  # ♉
    'Gemini': '\u264a',  # ♊
    'Cancer': '\u264b',  # ♋
    'Leo': '\u264c',  # ♌
    'Virgo': '\u264d',  # ♍
    'Libra': '\u264e',  # ♎
    'Scorpio': '\u264f',  # ♏
    'Sagittarius': '\u2650',  # ♐
    'Capricorn': '\u2651',  # ♑
    'Aquarius': '\u2652',  # ♒
    'Pisces': '\u2653',  # ♓
}

# Element associations
ZODIAC_ELEMENTS = {
    'Aries': 'fire',
    'Leo': 'fire',
    'Sagittarius': 'fire',
    'Taurus': 'earth',
    'Virgo': 'earth',
    'Capricorn': 'earth',
    'Gemini': 'air',
    'Libra': 'air',
    'Aquarius': 'air',
    'Cancer': 'water',
    'Scorpio': 'water',
    'Pisces': 'water',
}

MONTH_ABBR = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
              'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def parse_date(value: Union[date, datetime, str, None]) -> date:
    """
    Coerce a date, datetime or ISO 'YYYY-MM-DD' string to a date.

    Raises:
        InvalidDateError: if the value is empty or cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise InvalidDateError(f"Invalid date: {value!r}")

    text = value.strip()
    try:
        if 'T' in text:
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
        return datetime.strptime(text, '%Y-%m-%d').date()
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value!r}") from e


def resolve_zodiac_sign(birthdate: Union[date, datetime, str]) -> str:
    """
    Calculate zodiac sign from birthdate.

    The year is ignored; only month and day select the sign.

    Args:
        birthdate: Date of birth (date, datetime or 'YYYY-MM-DD')

    Returns:
        Zodiac sign name, e.g. 'Aries'

    Raises:
        InvalidDateError: if the birthdate cannot be parsed
    """
    birthdate = parse_date(birthdate)
    month = birthdate.month
    day = birthdate.day

    # Every range covers the tail of one month and the head of the next,
    # Capricorn included (Dec -> Jan)
    for sign, start_m, start_d, end_m, end_d in ZODIAC_SIGNS:
        if (month == start_m and day >= start_d) or (month == end_m and day <= end_d):
            return sign

    # Every (month, day) pair is covered by the table above
    raise InvalidDateError(f"Invalid date: {birthdate!r}")


def get_zodiac_date_range(sign: str) -> str:
    """Get date range string for a sign, e.g. 'Mar 21 - Apr 19'."""
    for name, start_m, start_d, end_m, end_d in ZODIAC_SIGNS:
        if name == sign:
            return f"{MONTH_ABBR[start_m - 1]} {start_d} - {MONTH_ABBR[end_m - 1]} {end_d}"
    return ''


def get_zodiac_data(sign: str) -> Optional[Dict]:
    """
    Get display data for a sign.

    Returns:
        Dict with sign, symbol, element, date_range
        or None for an unknown sign
    """
    if sign not in ZODIAC_SIGN_NAMES:
        return None

    return {
        'sign': sign,
        'symbol': ZODIAC_SYMBOLS[sign],
        'element': ZODIAC_ELEMENTS[sign],
        'date_range': get_zodiac_date_range(sign),
    }
