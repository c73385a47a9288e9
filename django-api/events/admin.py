from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "city", "genre", "date", "price", "is_trending"]
    list_filter = ["genre", "is_trending"]
    search_fields = ["title", "city", "genre"]
