"""Tests for the dashboard aggregates."""

import datetime

from django.urls import reverse

from dashboards.services import (
    RECENT_LIMIT,
    get_dashboard_stats,
    get_recent_batches,
    get_recent_recipes,
)
from inventory.models import InventoryItem


class TestDashboardStats:
    def test_counts_only_own_rows(
        self, user, other_user, make_ingredient, make_recipe, make_batch
    ):
        shea = make_ingredient(user)
        recipe = make_recipe(user, [shea])
        make_batch(user, recipe)
        InventoryItem.objects.create(
            user=user, ingredient=shea, purchase_date=datetime.date(2026, 1, 1)
        )
        theirs = make_ingredient(other_user, name="Mango Butter")
        make_recipe(other_user, [theirs])

        assert get_dashboard_stats(user) == {
            "ingredients": 1,
            "recipes": 1,
            "inventory": 1,
            "batches": 1,
        }

    def test_empty_user(self, user):
        assert set(get_dashboard_stats(user).values()) == {0}


class TestRecentActivity:
    def test_recent_recipes_limited(self, user, make_ingredient, make_recipe):
        shea = make_ingredient(user)
        recipes = [make_recipe(user, [shea], title=f"Cream {n}") for n in range(7)]

        recent = list(get_recent_recipes(user))

        assert len(recent) == RECENT_LIMIT
        assert recent[0] == recipes[-1]

    def test_recent_batches_by_date(
        self, user, make_ingredient, make_recipe, make_batch
    ):
        recipe = make_recipe(user, [make_ingredient(user)])
        batches = [
            make_batch(user, recipe, made_on=datetime.date(2026, 1, day))
            for day in range(1, 8)
        ]

        recent = list(get_recent_batches(user))

        assert len(recent) == RECENT_LIMIT
        assert recent == batches[::-1][:RECENT_LIMIT]


class TestDashboardView:
    def test_root_renders_dashboard(self, auth_client, user, make_ingredient):
        make_ingredient(user)

        response = auth_client.get(reverse("dashboard"))

        assert response.status_code == 200
        assert response.context["stats"]["ingredients"] == 1

    def test_show_alias(self, auth_client):
        response = auth_client.get(reverse("dashboard_show"))

        assert response.status_code == 200
