from django.conf import settings
from django.db import models
from django.urls import reverse

from core.attachments import PhotoField
from core.models import OwnedModel
from ingredients.models import Ingredient


class Recipe(OwnedModel):
    """
    A formulation, like 'Curl Cream' or 'Whipped Body Butter'.

    Ingredients are linked via RecipeIngredient and are only ever written
    together with the recipe (see recipes.services.nested_save). A saved
    recipe always has at least one RecipeIngredient.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recipes",
    )
    title = models.CharField(max_length=200)
    product_type = models.CharField(
        max_length=100,
        help_text="Kind of product (e.g., 'Cream', 'Serum', 'Shampoo Bar')",
    )
    method = models.TextField(help_text="Preparation instructions")
    photo = PhotoField()
    ingredients = models.ManyToManyField(
        Ingredient,
        through="RecipeIngredient",
        related_name="recipes",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("recipe_detail", args=[self.pk])


class RecipeIngredient(models.Model):
    """
    Links a recipe to one of its ingredients with a free-text quantity.

    Example: "Curl Cream" calls for "2oz" of "Shea Butter"
    - ingredient = Ingredient(name="Shea Butter")
    - quantity = "2oz"
    """

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        related_name="recipe_ingredients",
    )
    ingredient = models.ForeignKey(
        Ingredient,
        on_delete=models.CASCADE,
        related_name="recipe_ingredients",
    )
    quantity = models.CharField(
        max_length=100,
        blank=True,
        help_text="Amount as written (e.g., '2oz', '15%', '3 drops')",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["pk"]
        verbose_name = "recipe ingredient"
        verbose_name_plural = "recipe ingredients"

    def __str__(self):
        if self.quantity:
            return f"{self.quantity} {self.ingredient.name}"
        return self.ingredient.name
