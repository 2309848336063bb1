"""Aggregates shown on a user's dashboard."""

from batches.models import Batch
from ingredients.models import Ingredient
from inventory.models import InventoryItem
from recipes.models import Recipe

RECENT_LIMIT = 5


def get_dashboard_stats(user) -> dict[str, int]:
    """Count the rows a user owns, per resource."""
    return {
        "ingredients": Ingredient.objects.for_user(user).count(),
        "recipes": Recipe.objects.for_user(user).count(),
        "inventory": InventoryItem.objects.for_user(user).count(),
        "batches": Batch.objects.for_user(user).count(),
    }


def get_recent_recipes(user, limit=RECENT_LIMIT):
    return Recipe.objects.for_user(user).order_by("-created_at", "-pk")[:limit]


def get_recent_batches(user, limit=RECENT_LIMIT):
    return (
        Batch.objects.for_user(user)
        .select_related("recipe")
        .order_by("-made_on", "-pk")[:limit]
    )
