import datetime

import pytest

PASSWORD = "correct-horse-battery"

# Smallest valid GIF
GIF = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04"
    b"\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)


@pytest.fixture(autouse=True)
def fast_passwords(settings):
    """MD5 hashing keeps signup/login tests fast."""
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploaded photos in a per-test directory."""
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def client():
    """A Django test client instance."""
    from django.test import Client

    return Client()


@pytest.fixture
def user(db):
    from accounts.models import User

    return User.objects.create_user(email="maker@example.com", password=PASSWORD)


@pytest.fixture
def other_user(db):
    from accounts.models import User

    return User.objects.create_user(email="rival@example.com", password=PASSWORD)


@pytest.fixture
def auth_client(client, user):
    """A client signed in as ``user``."""
    client.force_login(user)
    return client


@pytest.fixture
def make_ingredient(db):
    """Factory for ingredients owned by a given user."""
    from ingredients.models import Ingredient

    def make(owner, name="Shea Butter", category="Butter", **kwargs):
        return Ingredient.objects.create(
            user=owner, name=name, category=category, **kwargs
        )

    return make


@pytest.fixture
def make_recipe(db):
    """Factory for recipes with one RecipeIngredient per given ingredient."""
    from recipes.models import Recipe, RecipeIngredient

    def make(owner, ingredients, title="Curl Cream", **kwargs):
        kwargs.setdefault("product_type", "Cream")
        kwargs.setdefault("method", "Mix and heat")
        recipe = Recipe.objects.create(user=owner, title=title, **kwargs)
        for ingredient in ingredients:
            RecipeIngredient.objects.create(
                recipe=recipe, ingredient=ingredient, quantity="1oz"
            )
        return recipe

    return make


@pytest.fixture
def make_batch(db):
    from batches.models import Batch

    def make(owner, recipe, made_on=None, **kwargs):
        return Batch.objects.create(
            user=owner,
            recipe=recipe,
            made_on=made_on or datetime.date(2026, 3, 1),
            **kwargs,
        )

    return make


def recipe_form_data(rows, initial=0, prefix="recipe_ingredients", **fields):
    """
    Build POST data for the recipe form and its ingredient rows.

    Args:
        rows: List of dicts with optional keys id, ingredient, quantity, DELETE.
            Rows with an id must come first and number ``initial``.
        initial: How many rows are existing RecipeIngredients.
        **fields: Recipe fields; title/product_type/method get defaults.
    """
    data = {
        "title": "Curl Cream",
        "product_type": "Cream",
        "method": "Mix and heat",
        f"{prefix}-TOTAL_FORMS": str(len(rows)),
        f"{prefix}-INITIAL_FORMS": str(initial),
        f"{prefix}-MIN_NUM_FORMS": "0",
        f"{prefix}-MAX_NUM_FORMS": "1000",
    }
    data.update(fields)
    for index, row in enumerate(rows):
        for key in ("id", "ingredient", "quantity"):
            value = row.get(key)
            data[f"{prefix}-{index}-{key}"] = "" if value is None else str(value)
        if row.get("DELETE"):
            data[f"{prefix}-{index}-DELETE"] = "on"
    return data
