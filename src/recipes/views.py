"""Recipe views."""

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
from core.services import delete_owned

from .forms import recipe_forms
from .models import Recipe
from .services import save_recipe


def _user_recipes(request):
    return Recipe.objects.for_user(request.user)


def _get_recipe(request, pk):
    return get_object_or_404(_user_recipes(request), pk=pk)


def _render_form(request, form, formset, recipe=None, errors=None, status=200):
    base_errors = (errors or {}).get("__all__", [])
    return render(
        request,
        "recipes/recipe_form.html",
        {
            "form": form,
            "formset": formset,
            "recipe": recipe,
            "base_errors": base_errors,
        },
        status=status,
    )


@login_required
@require_http_methods(["GET", "POST"])
def recipe_list(request):
    """GET lists the user's recipes, newest first; POST creates one."""
    if request.method == "POST":
        try:
            recipe = save_recipe(request.user, request.POST, request.FILES)
        except ValidationFailed as e:
            return _render_form(
                request, e.form, e.formset, errors=e.errors, status=UNPROCESSABLE
            )
        messages.success(request, "Recipe was successfully created.")
        return redirect(recipe)

    recipes = _user_recipes(request).prefetch_related("recipe_ingredients__ingredient")
    return render(request, "recipes/recipe_list.html", {"recipes": recipes})


@login_required
@require_GET
def recipe_new(request):
    """Blank recipe form with a handful of empty ingredient rows."""
    form, formset = recipe_forms(request.user)
    return _render_form(request, form, formset)


@login_required
@require_http_methods(["GET", "POST", "PUT", "PATCH", "DELETE"])
def recipe_detail(request, pk):
    """GET shows, POST/PUT/PATCH update, DELETE destroys."""
    recipe = _get_recipe(request, pk)

    if request.method == "DELETE":
        return _destroy(request, recipe)
    if request.method != "GET":
        return _update(request, recipe)

    recipe_ingredients = recipe.recipe_ingredients.select_related("ingredient")
    batches = recipe.batches.order_by("-made_on")[:5]
    return render(
        request,
        "recipes/recipe_detail.html",
        {
            "recipe": recipe,
            "recipe_ingredients": recipe_ingredients,
            "batches": batches,
        },
    )


@login_required
@require_GET
def recipe_edit(request, pk):
    recipe = _get_recipe(request, pk)
    form, formset = recipe_forms(request.user, recipe=recipe)
    return _render_form(request, form, formset, recipe=recipe)


@login_required
@require_POST
def recipe_delete(request, pk):
    """Destroy from an HTML form, which cannot send DELETE."""
    return _destroy(request, _get_recipe(request, pk))


def _update(request, recipe):
    data, files = request_data(request)
    try:
        recipe = save_recipe(request.user, data, files, recipe=recipe)
    except ValidationFailed as e:
        # The bound form has already applied the rejected values to recipe
        saved = _get_recipe(request, recipe.pk)
        return _render_form(
            request,
            e.form,
            e.formset,
            recipe=saved,
            errors=e.errors,
            status=UNPROCESSABLE,
        )
    messages.success(request, "Recipe was successfully updated.")
    return see_other(recipe)


def _destroy(request, recipe):
    delete_owned(recipe)
    messages.success(request, "Recipe was successfully destroyed.")
    return see_other("recipe_list")
