from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError
from django.forms.formsets import DELETION_FIELD_NAME
from django.forms.models import BaseInlineFormSet, inlineformset_factory

from ingredients.models import Ingredient

from .models import Recipe, RecipeIngredient

ROWS_PREFIX = "recipe_ingredients"

MISSING_INGREDIENTS = "Recipe must have at least one ingredient"

# Blank rows offered below a saved recipe's ingredients on the edit form
EDIT_BLANK_ROWS = 1


class RecipeForm(forms.ModelForm):
    class Meta:
        model = Recipe
        fields = ["title", "product_type", "method", "photo"]
        widgets = {
            "method": forms.Textarea(attrs={"rows": 6}),
        }


class RecipeIngredientForm(forms.ModelForm):
    """One ingredient row; the ingredient must come from the user's library."""

    class Meta:
        model = RecipeIngredient
        fields = ["ingredient", "quantity"]

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["ingredient"].queryset = Ingredient.objects.for_user(user)


def marked_for_removal(form) -> bool:
    return bool(form.cleaned_data.get(DELETION_FIELD_NAME, False))


def removed_row_ids(formset) -> set:
    """
    Ids of saved rows that any submitted form marks for removal.

    A row id submitted twice, once plain and once flagged, is removed.
    """
    return {
        form.instance.pk
        for form in formset.initial_forms
        if form.instance.pk is not None and marked_for_removal(form)
    }


class BaseRecipeIngredientFormSet(BaseInlineFormSet):
    """
    The ingredient rows submitted with a recipe.

    Rows without an id that were left blank are skipped; rows with an id are
    updated, or deleted when their removal box is ticked. At least one row must
    survive.
    """

    def add_fields(self, form, index):
        super().add_fields(form, index)
        # Row ids must belong to this recipe
        form.fields[self.model._meta.pk.name].queryset = self.get_queryset()

    def kept_forms(self):
        """Valid rows that will exist after saving."""
        removed = removed_row_ids(self)
        return [
            form
            for form in self.forms
            if form.cleaned_data
            and not marked_for_removal(form)
            and form.instance.pk not in removed
        ]

    def clean(self):
        super().clean()
        if any(self.errors):
            return
        if not self.kept_forms():
            raise ValidationError(MISSING_INGREDIENTS, code="no_ingredients")


def recipe_ingredient_formset(extra: int):
    return inlineformset_factory(
        Recipe,
        RecipeIngredient,
        form=RecipeIngredientForm,
        formset=BaseRecipeIngredientFormSet,
        fields=["ingredient", "quantity"],
        extra=extra,
        can_delete=True,
    )


def recipe_forms(user, recipe=None, data=None, files=None):
    """
    Build the recipe form and its ingredient-row formset.

    Args:
        user: The recipe's owner; ingredient choices are limited to their
            library.
        recipe: Existing recipe to edit, or None for a new one.
        data, files: Submitted input; leave as None for blank forms.

    Returns:
        (RecipeForm, formset) tuple.
    """
    if recipe is None:
        recipe = Recipe(user=user)
        extra = settings.NEW_RECIPE_BLANK_ROWS
    else:
        extra = EDIT_BLANK_ROWS

    formset_class = recipe_ingredient_formset(extra)
    form = RecipeForm(data, files, instance=recipe)
    formset = formset_class(
        data,
        files,
        instance=recipe,
        prefix=ROWS_PREFIX,
        form_kwargs={"user": user},
    )
    return form, formset
