from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.contrib.auth.models import User
from .models import Profile


# Inline Profile in User Admin
class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = 'Profile'
    fields = ('name', 'birthdate', 'zodiac_sign', 'created_at')
    readonly_fields = ('zodiac_sign', 'created_at')


class CustomUserAdmin(UserAdmin):
    inlines = (ProfileInline,)
    list_display = ('email', 'profile_name', 'zodiac_sign', 'date_joined', 'last_login', 'is_active')
    list_filter = ('profile__zodiac_sign', 'is_staff', 'is_active', 'date_joined')
    search_fields = ('email', 'profile__name')
    ordering = ('-date_joined',)

    def profile_name(self, obj):
        if hasattr(obj, 'profile'):
            return obj.profile.name
        return '-'
    profile_name.short_description = 'Name'
    profile_name.admin_order_field = 'profile__name'

    def zodiac_sign(self, obj):
        if hasattr(obj, 'profile'):
            return obj.profile.zodiac_display
        return '-'
    zodiac_sign.short_description = 'Sign'
    zodiac_sign.admin_order_field = 'profile__zodiac_sign'


admin.site.unregister(User)
admin.site.register(User, CustomUserAdmin)


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'birthdate', 'zodiac_sign', 'created_at']
    list_filter = ['zodiac_sign']
    search_fields = ['name', 'user__email']
    readonly_fields = ['zodiac_sign', 'created_at', 'updated_at']
    raw_id_fields = ['user']
