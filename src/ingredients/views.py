"""Ingredient library views; HTML by default, JSON on request."""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import (
    require_GET,
    require_http_methods,
    require_POST,
)

from core.exceptions import ValidationFailed
from core.http import (
    UNPROCESSABLE,
    json_errors,
    merge_submitted,
    request_data,
    see_other,
    wants_json,
)
from core.services import delete_owned, save_owned

from .forms import IngredientForm, ingredient_form_data
from .models import Ingredient
from .serializers import ingredient_to_dict


def _user_ingredients(request):
    return Ingredient.objects.for_user(request.user).prefetch_related("tags")


def _get_ingredient(request, pk):
    return get_object_or_404(_user_ingredients(request), pk=pk)


@login_required
@require_http_methods(["GET", "POST"])
def ingredient_list(request):
    """GET lists the user's ingredients; POST creates one."""
    if request.method == "POST":
        return _create(request)

    ingredients = _user_ingredients(request)
    if wants_json(request):
        return JsonResponse([ingredient_to_dict(i) for i in ingredients], safe=False)
    return render(
        request, "ingredients/ingredient_list.html", {"ingredients": ingredients}
    )


@login_required
@require_GET
def ingredient_new(request):
    return render(
        request, "ingredients/ingredient_form.html", {"form": IngredientForm()}
    )


@login_required
@require_http_methods(["GET", "POST", "PUT", "PATCH", "DELETE"])
def ingredient_detail(request, pk):
    """GET shows, POST/PUT/PATCH update, DELETE destroys."""
    ingredient = _get_ingredient(request, pk)

    if request.method == "DELETE":
        return _destroy(request, ingredient)
    if request.method != "GET":
        return _update(request, ingredient)

    if wants_json(request):
        return JsonResponse(ingredient_to_dict(ingredient))
    return render(
        request, "ingredients/ingredient_detail.html", {"ingredient": ingredient}
    )


@login_required
@require_GET
def ingredient_edit(request, pk):
    ingredient = _get_ingredient(request, pk)
    form = IngredientForm(instance=ingredient)
    return render(
        request,
        "ingredients/ingredient_form.html",
        {"form": form, "ingredient": ingredient},
    )


@login_required
@require_POST
def ingredient_delete(request, pk):
    """Destroy from an HTML form, which cannot send DELETE."""
    return _destroy(request, _get_ingredient(request, pk))


def _create(request):
    data, files = request_data(request)
    form = IngredientForm(data, files or None)
    try:
        ingredient = save_owned(form, request.user)
    except ValidationFailed as e:
        if wants_json(request):
            return json_errors(e.errors)
        return render(
            request,
            "ingredients/ingredient_form.html",
            {"form": e.form},
            status=UNPROCESSABLE,
        )

    if wants_json(request):
        response = JsonResponse(ingredient_to_dict(ingredient), status=201)
        response["Location"] = ingredient.get_absolute_url()
        return response
    messages.success(request, "Ingredient was successfully created.")
    return redirect(ingredient)


def _update(request, ingredient):
    data, files = request_data(request)
    if request.method == "PATCH":
        data = merge_submitted(ingredient_form_data(ingredient), data, ["tags"])

    form = IngredientForm(data, files or None, instance=ingredient)
    try:
        ingredient = save_owned(form, request.user)
    except ValidationFailed as e:
        if wants_json(request):
            return json_errors(e.errors)
        # The bound form has already applied the rejected values to ingredient
        saved = _get_ingredient(request, ingredient.pk)
        return render(
            request,
            "ingredients/ingredient_form.html",
            {"form": e.form, "ingredient": saved},
            status=UNPROCESSABLE,
        )

    if wants_json(request):
        return JsonResponse(ingredient_to_dict(ingredient))
    messages.success(request, "Ingredient was successfully updated.")
    return see_other(ingredient)


def _destroy(request, ingredient):
    delete_owned(ingredient)
    if wants_json(request):
        return HttpResponse(status=204)
    messages.success(request, "Ingredient was successfully destroyed.")
    return see_other("ingredient_list")
