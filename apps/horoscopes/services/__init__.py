# Horoscope services
from .generator import personalized_text, affirmation, lucky_numbers
from .records import (
    DuplicateRecordError,
    FutureDateError,
    entry_from_record,
    get_or_create_horoscope,
    get_history,
    get_horoscope_for_date,
    get_stats,
    current_streak,
)

__all__ = [
    'personalized_text',
    'affirmation',
    'lucky_numbers',
    'DuplicateRecordError',
    'FutureDateError',
    'entry_from_record',
    'get_or_create_horoscope',
    'get_history',
    'get_horoscope_for_date',
    'get_stats',
    'current_streak',
]
