import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


ZODIAC_CHOICES = [
    ('Aries', 'Aries'), ('Taurus', 'Taurus'), ('Gemini', 'Gemini'),
    ('Cancer', 'Cancer'), ('Leo', 'Leo'), ('Virgo', 'Virgo'),
    ('Libra', 'Libra'), ('Scorpio', 'Scorpio'), ('Sagittarius', 'Sagittarius'),
    ('Capricorn', 'Capricorn'), ('Aquarius', 'Aquarius'), ('Pisces', 'Pisces'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Profile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Name used to personalize horoscopes', max_length=50, validators=[django.core.validators.MinLengthValidator(2)])),
                ('birthdate', models.DateField(help_text='Birthdate for zodiac sign calculation')),
                ('zodiac_sign', models.CharField(choices=ZODIAC_CHOICES, editable=False, max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'indexes': [
                    models.Index(fields=['zodiac_sign'], name='profile_zodiac_sign_idx'),
                    models.Index(fields=['created_at'], name='profile_created_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(zodiac_sign__in=[choice for choice, _ in ZODIAC_CHOICES]),
                        name='profile_valid_zodiac_sign',
                    ),
                ],
            },
        ),
    ]
