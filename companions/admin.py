from django.contrib import admin

from .models import Companion, SessionHistory


@admin.register(Companion)
class CompanionAdmin(admin.ModelAdmin):
    list_display = ('name', 'subject', 'topic', 'duration', 'author', 'created_at')
    list_filter = ('subject',)
    search_fields = ('name', 'topic')


@admin.register(SessionHistory)
class SessionHistoryAdmin(admin.ModelAdmin):
    list_display = ('user', 'companion', 'created_at')
