from django.conf import settings
from django.db import models
from django.urls import reverse

from core.attachments import PhotoField
from core.models import OwnedModel


class Tag(models.Model):
    """
    A label for ingredients, like 'Humectant' or 'Scalp Soothing'.

    Tags are shared by every user.
    """

    name = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Ingredient(OwnedModel):
    """
    A raw material in a user's library, like 'Shea Butter' or 'Aloe Vera Juice'.

    Deleting an ingredient deletes the recipe rows that use it and the
    inventory lots bought of it; the recipes themselves are kept.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="ingredients",
    )
    name = models.CharField(max_length=200)
    category = models.CharField(
        max_length=100,
        help_text="Free-form category (e.g., 'Butter', 'Oil', 'Preservative')",
    )
    description = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    photo = PhotoField()
    tags = models.ManyToManyField(
        Tag,
        blank=True,
        related_name="ingredients",
        db_table="ingredients_tags",
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("ingredient_detail", args=[self.pk])
