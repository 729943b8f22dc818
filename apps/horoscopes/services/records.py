"""
Horoscope record storage.

Keeps at most one stored horoscope per user per calendar day, creating it
lazily on first request, and answers history and streak queries.
"""
import logging
from datetime import date, timedelta
from typing import Dict, Optional, Tuple

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Count, Max, Min
from django.utils import timezone

from ..models import Horoscope
from .generator import build_entry, generate_entry, personalized_text

logger = logging.getLogger(__name__)


class DuplicateRecordError(Exception):
    """A horoscope for this user and day was stored by another request first."""
    pass


class FutureDateError(ValueError):
    """Horoscopes are not available for days after today."""
    pass


def get_today() -> date:
    """Current calendar day in the configured TIME_ZONE."""
    return timezone.localdate()


def entry_from_record(horoscope: Horoscope) -> Dict:
    """API entry for a stored horoscope."""
    return build_entry(
        horoscope.zodiac_sign,
        horoscope.content,
        horoscope.date,
        created_at=horoscope.created_at,
        saved=True,
    )


def create_horoscope(user, day: date) -> Horoscope:
    """
    Generate and store the horoscope for (user, day).

    Raises:
        DuplicateRecordError: if a record for (user, day) already exists.
            The existing record is left untouched.
    """
    profile = user.profile
    content = personalized_text(profile.zodiac_sign, profile.name)

    try:
        with transaction.atomic():
            return Horoscope.objects.create(
                user=user,
                zodiac_sign=profile.zodiac_sign,
                content=content,
                date=day,
            )
    except IntegrityError as e:
        raise DuplicateRecordError(
            f"Horoscope for user {user.pk} on {day} already exists"
        ) from e


def get_or_create_horoscope(user, day: Optional[date] = None) -> Tuple[Horoscope, bool]:
    """
    Return the stored horoscope for (user, day), creating it if missing.

    Returns:
        (horoscope, created)
    """
    day = day or get_today()

    horoscope = Horoscope.objects.filter(user=user, date=day).first()
    if horoscope:
        return horoscope, False

    try:
        horoscope = create_horoscope(user, day)
    except DuplicateRecordError:
        # Lost the race with a concurrent request; serve the winner's record
        logger.info(f"Concurrent horoscope insert for user {user.pk} on {day}, reusing stored record")
        return Horoscope.objects.get(user=user, date=day), False

    logger.info(f"Created {horoscope.zodiac_sign} horoscope for user {user.pk} on {day}")
    return horoscope, True


def get_history(user, days: int = None, today: Optional[date] = None) -> Dict:
    """
    Horoscopes for the last `days` calendar days, newest first.

    Days without a stored horoscope get a freshly generated entry that is
    not saved.
    """
    if days is None:
        days = settings.HOROSCOPE_HISTORY_DEFAULT_DAYS
    if not 1 <= days <= settings.HOROSCOPE_HISTORY_MAX_DAYS:
        raise ValueError(
            f"days must be between 1 and {settings.HOROSCOPE_HISTORY_MAX_DAYS}"
        )

    end = today or get_today()
    start = end - timedelta(days=days - 1)
    profile = user.profile

    stored = {
        horoscope.date: horoscope
        for horoscope in Horoscope.objects.filter(user=user, date__gte=start, date__lte=end)
    }

    entries = []
    for offset in range(days):
        day = end - timedelta(days=offset)
        horoscope = stored.get(day)
        if horoscope:
            entries.append(entry_from_record(horoscope))
        else:
            entries.append(generate_entry(profile.zodiac_sign, profile.name, day))

    return {
        'horoscopes': entries,
        'total_days': days,
        'saved_count': len(stored),
        'generated_count': days - len(stored),
    }


def get_horoscope_for_date(user, day: date, today: Optional[date] = None) -> Dict:
    """
    Horoscope entry for a specific day.

    Today's horoscope is created if missing. Past days without a stored
    horoscope get an unsaved, generated entry.

    Raises:
        FutureDateError: for days after today
    """
    current = today or get_today()
    if day > current:
        raise FutureDateError("Cannot fetch horoscope for future dates.")

    if day == current:
        horoscope, _ = get_or_create_horoscope(user, day)
        return entry_from_record(horoscope)

    horoscope = Horoscope.objects.filter(user=user, date=day).first()
    if horoscope:
        return entry_from_record(horoscope)

    profile = user.profile
    return generate_entry(profile.zodiac_sign, profile.name, day)


def current_streak(user, today: Optional[date] = None) -> int:
    """Consecutive days, ending today, with a stored horoscope."""
    current = today or get_today()
    stored_dates = set(
        Horoscope.objects.filter(user=user, date__lte=current)
        .values_list('date', flat=True)
    )

    streak = 0
    check_date = current
    while check_date in stored_dates:
        streak += 1
        check_date -= timedelta(days=1)
    return streak


def longest_streak(user) -> int:
    """Longest run of consecutive days with a stored horoscope."""
    stored_dates = sorted(
        Horoscope.objects.filter(user=user).values_list('date', flat=True)
    )

    longest = 0
    run = 0
    previous = None
    for day in stored_dates:
        if previous is not None and day - previous == timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day
    return longest


def get_stats(user, today: Optional[date] = None) -> Dict:
    """Totals and streaks for a user's stored horoscopes."""
    totals = Horoscope.objects.filter(user=user).aggregate(
        total=Count('id'),
        first=Min('date'),
        latest=Max('date'),
    )
    profile = user.profile

    return {
        'total_horoscopes': totals['total'],
        'first_horoscope': totals['first'],
        'latest_horoscope': totals['latest'],
        'current_streak': current_streak(user, today=today),
        'longest_streak': longest_streak(user),
        'zodiac_sign': profile.zodiac_sign,
        'member_since': profile.created_at,
    }
