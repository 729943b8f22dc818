from datetime import date, timedelta
from unittest.mock import patch

import pytest
from django.db import IntegrityError, transaction

from apps.horoscopes.models import Horoscope
from apps.horoscopes.services import records
from apps.horoscopes.services.records import (
    DuplicateRecordError,
    FutureDateError,
    create_horoscope,
    current_streak,
    get_history,
    get_horoscope_for_date,
    get_or_create_horoscope,
    get_stats,
    longest_streak,
)

pytestmark = pytest.mark.django_db

TODAY = date(2024, 6, 15)


def store(user, day, content='A stored horoscope for testing purposes.'):
    return Horoscope.objects.create(
        user=user, zodiac_sign=user.profile.zodiac_sign, content=content, date=day
    )


class TestGetOrCreate:

    def test_creates_once_per_day(self, user):
        first, created = get_or_create_horoscope(user, TODAY)
        second, created_again = get_or_create_horoscope(user, TODAY)

        assert created is True
        assert created_again is False
        assert first.pk == second.pk
        assert second.content == first.content
        assert Horoscope.objects.filter(user=user).count() == 1

    def test_record_copies_profile_sign(self, user):
        horoscope, _ = get_or_create_horoscope(user, TODAY)
        assert horoscope.zodiac_sign == 'Taurus'
        assert 'John Doe' in horoscope.content

    def test_defaults_to_today(self, user):
        horoscope, _ = get_or_create_horoscope(user)
        assert horoscope.date == records.get_today()

    def test_database_rejects_second_record_for_same_day(self, user):
        store(user, TODAY)
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                store(user, TODAY, content='A competing horoscope for the same day.')

    def test_duplicate_insert_fails_without_overwriting(self, user):
        original = store(user, TODAY, content='The first request stored this reading.')

        with pytest.raises(DuplicateRecordError):
            create_horoscope(user, TODAY)

        original.refresh_from_db()
        assert original.content == 'The first request stored this reading.'
        assert Horoscope.objects.filter(user=user, date=TODAY).count() == 1

    def test_lost_race_returns_the_stored_record(self, user):
        def racing_create(racing_user, day):
            store(racing_user, day, content='Stored by the concurrent request.')
            raise DuplicateRecordError('lost the race')

        with patch.object(records, 'create_horoscope', side_effect=racing_create):
            horoscope, created = get_or_create_horoscope(user, TODAY)

        assert created is False
        assert horoscope.content == 'Stored by the concurrent request.'

    def test_each_user_gets_their_own_record(self, user):
        from apps.accounts.services import register_user

        other, _ = register_user('Jane Roe', 'jane@example.com', 'Password123', '1992-11-30')
        mine, _ = get_or_create_horoscope(user, TODAY)
        theirs, _ = get_or_create_horoscope(other, TODAY)

        assert mine.pk != theirs.pk
        assert theirs.zodiac_sign == 'Sagittarius'


class TestHistory:

    def test_no_records_generates_unsaved_entries(self, user):
        history = get_history(user, 3, today=TODAY)

        assert history['total_days'] == 3
        assert history['saved_count'] == 0
        assert history['generated_count'] == 3
        assert [e['date'] for e in history['horoscopes']] == [
            TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=2)
        ]
        assert all(e['saved'] is False for e in history['horoscopes'])
        assert Horoscope.objects.count() == 0

    def test_merges_stored_records(self, user):
        store(user, TODAY - timedelta(days=1), content='Yesterday was stored.')
        # Outside the window
        store(user, TODAY - timedelta(days=3))

        history = get_history(user, 3, today=TODAY)
        entries = history['horoscopes']

        assert history['saved_count'] == 1
        assert history['generated_count'] == 2
        assert [e['saved'] for e in entries] == [False, True, False]
        assert entries[1]['content'] == 'Yesterday was stored.'
        assert 'created_at' in entries[1]

    def test_default_window(self, user, settings):
        history = get_history(user, today=TODAY)
        assert history['total_days'] == settings.HOROSCOPE_HISTORY_DEFAULT_DAYS

    @pytest.mark.parametrize('days', [0, -1, 31])
    def test_rejects_out_of_range_windows(self, user, days):
        with pytest.raises(ValueError):
            get_history(user, days, today=TODAY)


class TestHoroscopeForDate:

    def test_today_is_created(self, user):
        entry = get_horoscope_for_date(user, TODAY, today=TODAY)
        assert entry['saved'] is True
        assert Horoscope.objects.filter(user=user, date=TODAY).exists()

    def test_past_day_with_record(self, user):
        past = TODAY - timedelta(days=5)
        store(user, past, content='An older stored horoscope entry.')

        entry = get_horoscope_for_date(user, past, today=TODAY)
        assert entry['saved'] is True
        assert entry['content'] == 'An older stored horoscope entry.'

    def test_past_day_without_record_is_not_saved(self, user):
        past = TODAY - timedelta(days=5)
        entry = get_horoscope_for_date(user, past, today=TODAY)

        assert entry['saved'] is False
        assert entry['date'] == past
        assert not Horoscope.objects.filter(user=user, date=past).exists()

    def test_future_day_is_rejected(self, user):
        with pytest.raises(FutureDateError):
            get_horoscope_for_date(user, TODAY + timedelta(days=1), today=TODAY)


class TestStreaks:

    def test_counts_consecutive_days_ending_today(self, user):
        for offset in (0, 1, 2, 4, 5):
            store(user, TODAY - timedelta(days=offset))

        assert current_streak(user, today=TODAY) == 3

    def test_no_record_today_means_no_streak(self, user):
        store(user, TODAY - timedelta(days=1))
        store(user, TODAY - timedelta(days=2))

        assert current_streak(user, today=TODAY) == 0

    def test_longest_streak(self, user):
        for offset in (0, 2, 3, 4, 5, 9):
            store(user, TODAY - timedelta(days=offset))

        assert longest_streak(user) == 4

    def test_longest_streak_without_records(self, user):
        assert longest_streak(user) == 0

    def test_stats(self, user):
        store(user, TODAY)
        store(user, TODAY - timedelta(days=1))
        store(user, TODAY - timedelta(days=10))

        stats = get_stats(user, today=TODAY)

        assert stats['total_horoscopes'] == 3
        assert stats['first_horoscope'] == TODAY - timedelta(days=10)
        assert stats['latest_horoscope'] == TODAY
        assert stats['current_streak'] == 2
        assert stats['longest_streak'] == 2
        assert stats['zodiac_sign'] == 'Taurus'
        assert stats['member_since'] == user.profile.created_at

    def test_stats_without_records(self, user):
        stats = get_stats(user, today=TODAY)
        assert stats['total_horoscopes'] == 0
        assert stats['first_horoscope'] is None
        assert stats['latest_horoscope'] is None
        assert stats['current_streak'] == 0
