from django.contrib import admin

from .models import Score


@admin.register(Score)
class ScoreAdmin(admin.ModelAdmin):
    list_display = ["id", "test_type", "result", "anonymous_id", "created_at"]
    list_filter = ["test_type"]
    search_fields = ["anonymous_id"]
    ordering = ["-created_at"]
    readonly_fields = ["id", "created_at", "window_bucket"]
