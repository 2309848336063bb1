from django.conf import settings
from django.db import models
from django.urls import reverse

from core.attachments import PhotoField
from core.models import OwnedModel
from ingredients.models import Ingredient


class InventoryItem(OwnedModel):
    """
    A purchased lot of an ingredient.

    A user can hold several lots of the same ingredient (different brands,
    sizes or purchase dates); each is its own row.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="inventory_items",
    )
    ingredient = models.ForeignKey(
        Ingredient,
        on_delete=models.CASCADE,
        related_name="inventory_items",
    )
    brand = models.CharField(max_length=200, blank=True)
    size = models.CharField(
        max_length=100,
        blank=True,
        help_text="Container size as written (e.g., '16oz', '500ml')",
    )
    location = models.CharField(
        max_length=200,
        blank=True,
        help_text="Where it is stored (e.g., 'Fridge', 'Shelf B')",
    )
    purchase_date = models.DateField()
    notes = models.TextField(blank=True)
    photo = PhotoField(help_text="Receipt or label photo")

    class Meta:
        ordering = ["-purchase_date", "-pk"]
        verbose_name = "inventory item"
        verbose_name_plural = "inventory items"

    def __str__(self):
        label = self.ingredient.name
        if self.brand:
            label = f"{self.brand} {label}"
        return f"{label} ({self.purchase_date})"

    def get_absolute_url(self):
        return reverse("inventory_item_detail", args=[self.pk])
