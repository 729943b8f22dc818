from datetime import timedelta

import pytest
from django.core.management import call_command
from django.utils import timezone

from apps.horoscopes.models import Horoscope
from apps.horoscopes.services.generator import lucky_numbers

from .conftest import API_PREFIX

pytestmark = pytest.mark.django_db

TODAY_URL = f'{API_PREFIX}/horoscope/today/'
HISTORY_URL = f'{API_PREFIX}/horoscope/history/'
STATS_URL = f'{API_PREFIX}/horoscope/stats/'
SIGNS_URL = f'{API_PREFIX}/horoscope/signs/'


def date_url(value):
    return f'{API_PREFIX}/horoscope/date/{value}/'


def store(user, day, content='A stored horoscope for testing purposes.'):
    return Horoscope.objects.create(
        user=user, zodiac_sign=user.profile.zodiac_sign, content=content, date=day
    )


class TestToday:

    def test_requires_token(self, api_client):
        response = api_client.get(TODAY_URL)

        assert response.status_code == 401
        assert response.json()['status'] == 'error'

    def test_today(self, auth_client):
        response = auth_client.get(TODAY_URL)

        assert response.status_code == 200
        horoscope = response.json()['data']['horoscope']
        today = timezone.localdate()
        assert horoscope['zodiac_sign'] == 'Taurus'
        assert horoscope['date'] == today.isoformat()
        assert horoscope['affirmation'] == "I find beauty and stability in every moment of my day."
        assert horoscope['lucky_numbers'] == lucky_numbers('Taurus', today)
        assert horoscope['saved'] is True
        assert horoscope['created_at']

    def test_same_content_within_a_day(self, auth_client, user):
        first = auth_client.get(TODAY_URL).json()['data']['horoscope']
        second = auth_client.get(TODAY_URL).json()['data']['horoscope']

        assert first['content'] == second['content']
        assert first['created_at'] == second['created_at']
        assert Horoscope.objects.filter(user=user).count() == 1


class TestHistory:

    def test_no_records(self, auth_client, user):
        response = auth_client.get(HISTORY_URL, {'days': 3})

        assert response.status_code == 200
        data = response.json()['data']
        assert len(data['horoscopes']) == 3
        assert all(entry['saved'] is False for entry in data['horoscopes'])
        assert data['total_days'] == 3
        assert data['saved_count'] == 0
        assert data['generated_count'] == 3
        assert not Horoscope.objects.filter(user=user).exists()

    def test_newest_first_with_stored_today(self, auth_client):
        auth_client.get(TODAY_URL)

        data = auth_client.get(HISTORY_URL, {'days': 2}).json()['data']
        today = timezone.localdate()

        assert [entry['date'] for entry in data['horoscopes']] == [
            today.isoformat(), (today - timedelta(days=1)).isoformat()
        ]
        assert [entry['saved'] for entry in data['horoscopes']] == [True, False]
        assert data['saved_count'] == 1
        assert data['generated_count'] == 1

    def test_default_days(self, auth_client):
        data = auth_client.get(HISTORY_URL).json()['data']
        assert data['total_days'] == 7
        assert len(data['horoscopes']) == 7

    def test_non_numeric_days_uses_default(self, auth_client):
        data = auth_client.get(HISTORY_URL, {'days': 'lots'}).json()['data']
        assert data['total_days'] == 7

    def test_decimal_days_are_truncated(self, auth_client):
        data = auth_client.get(HISTORY_URL, {'days': '3.5'}).json()['data']
        assert data['total_days'] == 3

    def test_days_capped_at_thirty(self, auth_client):
        data = auth_client.get(HISTORY_URL, {'days': 100}).json()['data']
        assert data['total_days'] == 30
        assert len(data['horoscopes']) == 30

    def test_days_below_one(self, auth_client):
        response = auth_client.get(HISTORY_URL, {'days': 0})

        assert response.status_code == 400
        assert response.json()['status'] == 'error'


class TestByDate:

    def test_future_date(self, auth_client):
        tomorrow = timezone.localdate() + timedelta(days=1)
        response = auth_client.get(date_url(tomorrow.isoformat()))

        assert response.status_code == 400
        assert response.json()['status'] == 'error'
        assert 'future' in response.json()['message']

    @pytest.mark.parametrize('value', ['not-a-date', '2024-13-01', '2024-02-30', '15-06-2024'])
    def test_invalid_format(self, auth_client, value):
        response = auth_client.get(date_url(value))

        assert response.status_code == 400
        assert 'YYYY-MM-DD' in response.json()['message']

    def test_today_is_saved(self, auth_client, user):
        today = timezone.localdate()
        response = auth_client.get(date_url(today.isoformat()))

        assert response.status_code == 200
        assert response.json()['data']['horoscope']['saved'] is True
        assert Horoscope.objects.filter(user=user, date=today).exists()

    def test_matches_today_endpoint(self, auth_client):
        today = timezone.localdate()
        from_today = auth_client.get(TODAY_URL).json()['data']['horoscope']
        from_date = auth_client.get(date_url(today.isoformat())).json()['data']['horoscope']

        assert from_today['content'] == from_date['content']

    def test_past_date_without_record(self, auth_client, user):
        past = timezone.localdate() - timedelta(days=10)
        response = auth_client.get(date_url(past.isoformat()))

        horoscope = response.json()['data']['horoscope']
        assert response.status_code == 200
        assert horoscope['saved'] is False
        assert horoscope['date'] == past.isoformat()
        assert 'created_at' not in horoscope
        assert not Horoscope.objects.filter(user=user, date=past).exists()

    def test_past_date_with_record(self, auth_client, user):
        past = timezone.localdate() - timedelta(days=3)
        store(user, past, content='Three days ago this was stored.')

        horoscope = auth_client.get(date_url(past.isoformat())).json()['data']['horoscope']
        assert horoscope['saved'] is True
        assert horoscope['content'] == 'Three days ago this was stored.'
        assert horoscope['lucky_numbers'] == lucky_numbers('Taurus', past)


class TestStats:

    def test_stats_without_records(self, auth_client, user):
        response = auth_client.get(STATS_URL)

        assert response.status_code == 200
        stats = response.json()['data']['stats']
        assert stats['total_horoscopes'] == 0
        assert stats['first_horoscope'] is None
        assert stats['latest_horoscope'] is None
        assert stats['current_streak'] == 0
        assert stats['zodiac_sign'] == 'Taurus'
        assert stats['member_since']

    def test_streak(self, auth_client, user):
        today = timezone.localdate()
        store(user, today - timedelta(days=1))
        store(user, today - timedelta(days=2))
        store(user, today - timedelta(days=4))
        auth_client.get(TODAY_URL)

        stats = auth_client.get(STATS_URL).json()['data']['stats']

        assert stats['total_horoscopes'] == 4
        assert stats['current_streak'] == 3
        assert stats['longest_streak'] == 3
        assert stats['first_horoscope'] == (today - timedelta(days=4)).isoformat()
        assert stats['latest_horoscope'] == today.isoformat()


class TestPublicEndpoints:

    def test_signs(self, api_client):
        response = api_client.get(SIGNS_URL)

        assert response.status_code == 200
        signs = response.json()['data']['signs']
        assert len(signs) == 12
        assert signs[0]['sign'] == 'Aries'
        assert signs[0]['date_range'] == 'Mar 21 - Apr 19'
        assert signs[0]['element'] == 'fire'

    def test_health(self, api_client):
        response = api_client.get('/api/health/')

        assert response.status_code == 200
        assert response.json()['status'] == 'online'


class TestSeedSampleUser:

    def test_creates_sample_user_once(self, capsys):
        from django.contrib.auth.models import User

        call_command('seed_sample_user')
        call_command('seed_sample_user')

        users = User.objects.filter(email='sample@example.com')
        assert users.count() == 1
        assert users.get().profile.zodiac_sign == 'Cancer'
        assert users.get().check_password('Password123')
        assert 'already exists' in capsys.readouterr().out
