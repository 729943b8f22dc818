from django.contrib import admin
from .models import Horoscope


@admin.register(Horoscope)
class HoroscopeAdmin(admin.ModelAdmin):
    list_display = ['date', 'user', 'zodiac_sign', 'created_at']
    list_filter = ['zodiac_sign', 'date']
    search_fields = ['user__email', 'content']
    date_hierarchy = 'date'
    raw_id_fields = ['user']
    ordering = ['-date']
    readonly_fields = ['user', 'zodiac_sign', 'content', 'date', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        # Horoscopes are only created by the API
        return False
