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
            name='Horoscope',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('zodiac_sign', models.CharField(choices=ZODIAC_CHOICES, max_length=20)),
                ('content', models.TextField()),
                ('date', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='horoscopes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-date'],
                'indexes': [
                    models.Index(fields=['user', '-date'], name='horoscope_user_date_idx'),
                    models.Index(fields=['zodiac_sign', '-date'], name='horoscope_sign_date_idx'),
                    models.Index(fields=['created_at'], name='horoscope_created_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'date'), name='unique_horoscope_per_user_per_day'),
                    models.CheckConstraint(
                        condition=models.Q(zodiac_sign__in=[choice for choice, _ in ZODIAC_CHOICES]),
                        name='horoscope_valid_zodiac_sign',
                    ),
                ],
            },
        ),
    ]
