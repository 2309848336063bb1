"""
Seed the shared ingredient tag vocabulary.

Usage:
    python manage.py seed_tags
    python manage.py seed_tags --reset

Safe to run repeatedly: existing tags are left alone.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from ingredients.models import Tag

DEFAULT_TAGS = [
    "Hair Growth",
    "Moisturizing",
    "Anti-inflammatory",
    "Scalp Soothing",
    "Shine",
    "Curl Definition",
    "Preservative",
    "Emulsifier",
    "Antioxidant",
    "Humectant",
    "Emollient",
    "Surfactant",
]


class Command(BaseCommand):
    help = "Create the default ingredient tags"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete all existing tags (and their ingredient links) first",
        )

    def handle(self, *args, **options):
        with transaction.atomic():
            if options["reset"]:
                deleted, _ = Tag.objects.all().delete()
                self.stdout.write(self.style.WARNING(f"Deleted {deleted} rows"))

            created = 0
            for name in DEFAULT_TAGS:
                _, was_created = Tag.objects.get_or_create(name=name)
                created += was_created

        self.stdout.write(
            self.style.SUCCESS(f"Created {created} tags ({Tag.objects.count()} total)")
        )
