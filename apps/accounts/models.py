from django.db import models
from django.contrib.auth.models import User
from django.core.validators import MinLengthValidator

from apps.horoscopes.zodiac import (
    ZODIAC_CHOICES,
    ZODIAC_SIGN_NAMES,
    get_zodiac_data,
    resolve_zodiac_sign,
)


class Profile(models.Model):
    """Horoscope profile attached to each user account."""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    name = models.CharField(
        max_length=50,
        validators=[MinLengthValidator(2)],
        help_text="Name used to personalize horoscopes"
    )
    birthdate = models.DateField(help_text="Birthdate for zodiac sign calculation")

    # Derived from birthdate on every save
    zodiac_sign = models.CharField(
        max_length=20,
        choices=ZODIAC_CHOICES,
        editable=False,
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=models.Q(zodiac_sign__in=list(ZODIAC_SIGN_NAMES)),
                name='profile_valid_zodiac_sign',
            ),
        ]
        indexes = [
            models.Index(fields=['zodiac_sign'], name='profile_zodiac_sign_idx'),
            models.Index(fields=['created_at'], name='profile_created_idx'),
        ]

    def __str__(self):
        return f"Profile for {self.user.email}"

    def save(self, *args, **kwargs):
        self.zodiac_sign = resolve_zodiac_sign(self.birthdate)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'birthdate' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'zodiac_sign'}
        super().save(*args, **kwargs)

    @property
    def email(self):
        return self.user.email

    @property
    def zodiac_display(self):
        """Return zodiac sign with its symbol, e.g. '♈ Aries'."""
        data = get_zodiac_data(self.zodiac_sign)
        if data:
            return f"{data['symbol']} {data['sign']}"
        return None
