from django.contrib import admin

from .models import Recipe, RecipeIngredient


class RecipeIngredientInline(admin.TabularInline):
    model = RecipeIngredient
    extra = 1
    autocomplete_fields = ["ingredient"]
    fields = ["ingredient", "quantity"]


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    list_display = [
        "title",
        "product_type",
        "user",
        "get_ingredient_count",
        "updated_at",
    ]
    list_filter = ["product_type"]
    search_fields = ["title", "product_type", "user__email"]
    autocomplete_fields = ["user"]
    inlines = [RecipeIngredientInline]
    ordering = ["-created_at"]

    fieldsets = [
        (None, {"fields": ["user", "title", "product_type"]}),
        ("Instructions", {"fields": ["method", "photo"]}),
    ]

    def get_ingredient_count(self, obj):
        return obj.recipe_ingredients.count()

    get_ingredient_count.short_description = "Ingredients"


@admin.register(RecipeIngredient)
class RecipeIngredientAdmin(admin.ModelAdmin):
    list_display = ["recipe", "ingredient", "quantity"]
    search_fields = ["recipe__title", "ingredient__name"]
    autocomplete_fields = ["recipe", "ingredient"]
    ordering = ["recipe__title", "pk"]
