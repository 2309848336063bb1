from django.contrib import admin

from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ["ingredient", "brand", "size", "location", "purchase_date", "user"]
    list_filter = ["location", "purchase_date"]
    search_fields = ["ingredient__name", "brand", "user__email"]
    autocomplete_fields = ["user", "ingredient"]
    date_hierarchy = "purchase_date"
    ordering = ["-purchase_date"]
