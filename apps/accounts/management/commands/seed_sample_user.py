"""
Management command to create the sample account used for manual testing.

Usage:
    python manage.py seed_sample_user
    python manage.py seed_sample_user --email=demo@example.com --password=Secret123
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from apps.accounts.services import register_user

User = get_user_model()


class Command(BaseCommand):
    help = 'Create a sample user (skipped if the email is already registered)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            type=str,
            default='sample@example.com',
            help='Email of the sample user (default: sample@example.com)',
        )
        parser.add_argument(
            '--password',
            type=str,
            default='Password123',
            help='Password of the sample user (default: Password123)',
        )
        parser.add_argument(
            '--name',
            type=str,
            default='Sample User',
        )
        parser.add_argument(
            '--birthdate',
            type=str,
            default='1990-07-15',
            help='Birthdate as YYYY-MM-DD (default: 1990-07-15, a Cancer)',
        )

    def handle(self, *args, **options):
        email = options['email'].strip().lower()

        if User.objects.filter(username=email).exists():
            self.stdout.write(self.style.WARNING(f'User already exists: {email}'))
            return

        user, _ = register_user(
            name=options['name'],
            email=email,
            password=options['password'],
            birthdate=options['birthdate'],
        )

        self.stdout.write(self.style.SUCCESS(
            f'Created {email} ({user.profile.zodiac_sign})'
        ))
