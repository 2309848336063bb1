from django.conf import settings
from django.db import models
from django.urls import reverse

from core.models import OwnedModel
from recipes.models import Recipe


class Batch(OwnedModel):
    """A production run of a recipe on a given day."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="batches",
    )
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        related_name="batches",
    )
    made_on = models.DateField()
    notes = models.TextField(
        blank=True,
        help_text="Yield, tweaks, observations",
    )

    class Meta:
        ordering = ["-made_on", "-pk"]
        verbose_name_plural = "batches"

    def __str__(self):
        return f"{self.recipe.title} ({self.made_on})"

    def get_absolute_url(self):
        return reverse("batch_detail", args=[self.pk])
