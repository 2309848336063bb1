from django.contrib import admin

from .models import Ingredient, Tag


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ["name", "get_ingredient_count"]
    search_fields = ["name"]
    ordering = ["name"]

    def get_ingredient_count(self, obj):
        return obj.ingredients.count()

    get_ingredient_count.short_description = "Ingredients"


@admin.register(Ingredient)
class IngredientAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "user", "get_tags", "updated_at"]
    list_filter = ["category", "tags"]
    search_fields = ["name", "category", "user__email"]
    autocomplete_fields = ["user"]
    filter_horizontal = ["tags"]
    ordering = ["name"]

    fieldsets = [
        (None, {"fields": ["user", "name", "category"]}),
        ("Details", {"fields": ["description", "notes", "photo", "tags"]}),
    ]

    @admin.display(description="Tags")
    def get_tags(self, obj):
        return ", ".join(tag.name for tag in obj.tags.all())

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related("tags")
