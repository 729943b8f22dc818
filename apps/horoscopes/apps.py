from django.apps import AppConfig


class HoroscopesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.horoscopes'
    label = 'horoscopes'
    verbose_name = 'Horoscopes'
