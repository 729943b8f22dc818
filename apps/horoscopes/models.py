from django.db import models
from django.contrib.auth.models import User

from .zodiac import ZODIAC_CHOICES, ZODIAC_SIGN_NAMES


class Horoscope(models.Model):
    """
    A user's horoscope for one calendar day.

    Created lazily the first time the day is requested and never changed
    afterwards. The database enforces at most one row per (user, date).
    """

    # Owner
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='horoscopes'
    )

    # Copied from the profile when the reading is generated
    zodiac_sign = models.CharField(max_length=20, choices=ZODIAC_CHOICES)
    content = models.TextField()

    # Calendar day this reading is for
    date = models.DateField()

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'date'],
                name='unique_horoscope_per_user_per_day',
            ),
            models.CheckConstraint(
                condition=models.Q(zodiac_sign__in=list(ZODIAC_SIGN_NAMES)),
                name='horoscope_valid_zodiac_sign',
            ),
        ]
        indexes = [
            models.Index(fields=['user', '-date'], name='horoscope_user_date_idx'),
            models.Index(fields=['zodiac_sign', '-date'], name='horoscope_sign_date_idx'),
            models.Index(fields=['created_at'], name='horoscope_created_idx'),
        ]

    def __str__(self):
        return f"{self.date}: {self.zodiac_sign} for {self.user.email}"
