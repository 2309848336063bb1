"""Inventory lot views."""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import (
    require_GET,
    require_http_methods,
    require_POST,
)

from core.exceptions import ValidationFailed
from core.http import UNPROCESSABLE, request_data, see_other
from core.services import delete_owned, save_owned

from .forms import InventoryItemForm
from .models import InventoryItem


def _user_items(request):
    return InventoryItem.objects.for_user(request.user).select_related("ingredient")


def _get_item(request, pk):
    return get_object_or_404(_user_items(request), pk=pk)


def _render_form(request, form, item=None, status=200):
    return render(
        request,
        "inventory/inventory_item_form.html",
        {"form": form, "item": item},
        status=status,
    )


@login_required
@require_http_methods(["GET", "POST"])
def inventory_item_list(request):
    """GET lists lots, most recently purchased first; POST records one."""
    if request.method == "POST":
        form = InventoryItemForm(request.POST, request.FILES, user=request.user)
        try:
            save_owned(form, request.user)
        except ValidationFailed as e:
            return _render_form(request, e.form, status=UNPROCESSABLE)
        messages.success(request, "Inventory item was successfully created.")
        return redirect("inventory_item_list")

    return render(
        request,
        "inventory/inventory_item_list.html",
        {"items": _user_items(request)},
    )


@login_required
@require_GET
def inventory_item_new(request):
    initial = {}
    ingredient_id = request.GET.get("ingredient_id")
    if ingredient_id:
        initial["ingredient"] = ingredient_id
    return _render_form(request, InventoryItemForm(initial=initial, user=request.user))


@login_required
@require_http_methods(["GET", "POST", "PUT", "PATCH", "DELETE"])
def inventory_item_detail(request, pk):
    """GET shows, POST/PUT/PATCH update, DELETE removes."""
    item = _get_item(request, pk)

    if request.method == "DELETE":
        return _destroy(request, item)
    if request.method != "GET":
        return _update(request, item)

    return render(request, "inventory/inventory_item_detail.html", {"item": item})


@login_required
@require_GET
def inventory_item_edit(request, pk):
    item = _get_item(request, pk)
    return _render_form(
        request, InventoryItemForm(instance=item, user=request.user), item=item
    )


@login_required
@require_POST
def inventory_item_delete(request, pk):
    return _destroy(request, _get_item(request, pk))


def _update(request, item):
    data, files = request_data(request)
    form = InventoryItemForm(data, files, instance=item, user=request.user)
    try:
        save_owned(form, request.user)
    except ValidationFailed as e:
        # The bound form has already applied the rejected values to item
        saved = _get_item(request, item.pk)
        return _render_form(request, e.form, item=saved, status=UNPROCESSABLE)
    messages.success(request, "Inventory item was successfully updated.")
    return see_other("inventory_item_list")


def _destroy(request, item):
    delete_owned(item)
    messages.success(request, "Inventory item was successfully removed.")
    return see_other("inventory_item_list")
