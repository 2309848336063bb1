"""Tests for inventory lots."""

import datetime

import pytest
from django.urls import reverse

from inventory.forms import InventoryItemForm
from inventory.models import InventoryItem


@pytest.fixture
def shea(user, make_ingredient):
    return make_ingredient(user)


@pytest.fixture
def lot(user, shea):
    return InventoryItem.objects.create(
        user=user,
        ingredient=shea,
        brand="Better Shea",
        size="16oz",
        location="Pantry",
        purchase_date=datetime.date(2026, 2, 10),
    )


class TestInventoryForm:
    def test_purchase_date_required(self, user, shea):
        form = InventoryItemForm({"ingredient": shea.pk, "brand": "Acme"}, user=user)

        assert not form.is_valid()
        assert "purchase_date" in form.errors

    def test_ingredient_must_be_own(self, user, other_user, make_ingredient):
        foreign = make_ingredient(other_user, name="Mango Butter")
        form = InventoryItemForm(
            {"ingredient": foreign.pk, "purchase_date": "2026-02-10"}, user=user
        )

        assert not form.is_valid()
        assert "ingredient" in form.errors


class TestInventoryViews:
    def test_create_redirects_to_list(self, auth_client, user, shea):
        response = auth_client.post(
            reverse("inventory_item_list"),
            {
                "ingredient": shea.pk,
                "brand": "Better Shea",
                "size": "16oz",
                "purchase_date": "2026-02-10",
            },
        )

        assert response.status_code == 302
        assert response["Location"] == reverse("inventory_item_list")
        item = InventoryItem.objects.get()
        assert item.user == user
        assert item.purchase_date == datetime.date(2026, 2, 10)

    def test_create_without_date_is_unprocessable(self, auth_client, shea):
        response = auth_client.post(
            reverse("inventory_item_list"), {"ingredient": shea.pk}
        )

        assert response.status_code == 422
        assert not InventoryItem.objects.exists()

    def test_new_preselects_ingredient(self, auth_client, shea):
        response = auth_client.get(
            reverse("inventory_item_new"), {"ingredient_id": shea.pk}
        )

        assert response.status_code == 200
        assert str(response.context["form"].initial["ingredient"]) == str(shea.pk)

    def test_update(self, auth_client, shea, lot):
        response = auth_client.post(
            reverse("inventory_item_detail", args=[lot.pk]),
            {"ingredient": shea.pk, "location": "Fridge", "purchase_date": "2026-02-10"},
        )

        assert response.status_code == 303
        assert response["Location"] == reverse("inventory_item_list")
        lot.refresh_from_db()
        assert lot.location == "Fridge"

    def test_delete(self, auth_client, lot):
        response = auth_client.post(reverse("inventory_item_delete", args=[lot.pk]))

        assert response.status_code == 303
        assert not InventoryItem.objects.exists()

    def test_list_newest_purchase_first(self, auth_client, user, shea, lot):
        newer = InventoryItem.objects.create(
            user=user, ingredient=shea, purchase_date=datetime.date(2026, 4, 1)
        )

        response = auth_client.get(reverse("inventory_item_list"))

        assert list(response.context["items"]) == [newer, lot]

    def test_pages_render(self, auth_client, lot):
        for name, args in [
            ("inventory_item_list", []),
            ("inventory_item_new", []),
            ("inventory_item_detail", [lot.pk]),
            ("inventory_item_edit", [lot.pk]),
        ]:
            response = auth_client.get(reverse(name, args=args))
            assert response.status_code == 200, name

    def test_other_users_lot_is_not_found(self, client, other_user, lot):
        client.force_login(other_user)

        response = client.get(reverse("inventory_item_detail", args=[lot.pk]))
        assert response.status_code == 404
        response = client.post(reverse("inventory_item_delete", args=[lot.pk]))
        assert response.status_code == 404
        assert InventoryItem.objects.filter(pk=lot.pk).exists()

    def test_other_users_lot_cannot_be_updated(self, client, other_user, shea, lot):
        client.force_login(other_user)

        response = client.post(
            reverse("inventory_item_detail", args=[lot.pk]),
            {"ingredient": shea.pk, "location": "Stolen", "purchase_date": "2026-02-10"},
        )

        assert response.status_code == 404
        lot.refresh_from_db()
        assert lot.location == "Pantry"
