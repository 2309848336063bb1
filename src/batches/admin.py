from django.contrib import admin

from .models import Batch


@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    list_display = ["recipe", "made_on", "user"]
    list_filter = ["made_on"]
    search_fields = ["recipe__title", "notes", "user__email"]
    autocomplete_fields = ["user", "recipe"]
    date_hierarchy = "made_on"
    ordering = ["-made_on"]
