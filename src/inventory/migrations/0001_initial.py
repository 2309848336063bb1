import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import core.attachments


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("ingredients", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="InventoryItem",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("brand", models.CharField(blank=True, max_length=200)),
                (
                    "size",
                    models.CharField(
                        blank=True,
                        help_text="Container size as written (e.g., '16oz', '500ml')",
                        max_length=100,
                    ),
                ),
                (
                    "location",
                    models.CharField(
                        blank=True,
                        help_text="Where it is stored (e.g., 'Fridge', 'Shelf B')",
                        max_length=200,
                    ),
                ),
                ("purchase_date", models.DateField()),
                ("notes", models.TextField(blank=True)),
                (
                    "photo",
                    core.attachments.PhotoField(
                        blank=True,
                        help_text="Receipt or label photo",
                        max_length=255,
                        upload_to=core.attachments.photo_upload_to,
                    ),
                ),
                (
                    "ingredient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inventory_items",
                        to="ingredients.ingredient",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inventory_items",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "inventory item",
                "verbose_name_plural": "inventory items",
                "ordering": ["-purchase_date", "-pk"],
            },
        ),
    ]
