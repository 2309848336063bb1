"""Save a recipe together with its ingredient rows in one transaction.

The submitted rows are split into three disjoint lists:
1. Inserts - rows without an id that have something filled in
2. Updates - rows with an id and no removal flag
3. Deletes - rows whose id is flagged for removal in any submitted form

Rows without an id that were left blank are dropped, so forms can always offer
a few empty slots. The recipe fields and every row change commit together or
not at all.
"""

import logging
from dataclasses import dataclass, field

from django.db import transaction

from core.exceptions import ValidationFailed, form_errors
from recipes.forms import (
    MISSING_INGREDIENTS,
    marked_for_removal,
    recipe_forms,
    removed_row_ids,
)
from recipes.models import Recipe, RecipeIngredient

logger = logging.getLogger(__name__)


@dataclass
class RowPlan:
    """Row changes computed from a validated ingredient formset."""

    inserts: list = field(default_factory=list)
    updates: list = field(default_factory=list)
    deletes: list[RecipeIngredient] = field(default_factory=list)

    @property
    def remaining(self) -> int:
        """Number of rows the recipe will have once the plan is applied."""
        return len(self.inserts) + len(self.updates)


def plan_rows(formset) -> RowPlan:
    """
    Split a valid ingredient formset into inserts, updates and deletes.

    Inserts and updates are the row forms themselves; deletes are the
    RecipeIngredient rows to remove.
    """
    plan = RowPlan()
    removed = removed_row_ids(formset)
    deletes = {}
    for form in formset.initial_forms:
        pk = form.instance.pk
        if pk in removed:
            deletes.setdefault(pk, form.instance)
        elif not marked_for_removal(form):
            plan.updates.append(form)
    plan.deletes = list(deletes.values())

    for form in formset.extra_forms:
        if not form.has_changed() or marked_for_removal(form):
            continue
        plan.inserts.append(form)
    return plan


def collect_errors(form, formset) -> dict[str, list[str]]:
    """
    Merge recipe and row errors into one field -> messages dict.

    Row errors are keyed by the row's form field name, e.g.
    ``recipe_ingredients-0-ingredient``. Errors about the row set as a whole
    are reported on the recipe (``__all__``).
    """
    errors = form_errors(form)

    base = [str(message) for message in formset.non_form_errors()]
    if base:
        errors.setdefault("__all__", []).extend(base)

    for row in formset.forms:
        if hasattr(row, "cleaned_data") and marked_for_removal(row):
            continue
        for field_name, messages in row.errors.items():
            errors[row.add_prefix(field_name)] = [str(m) for m in messages]
    return errors


def _apply(form, plan: RowPlan) -> Recipe:
    if form.instance.pk is not None:
        # Serialise concurrent saves of the same recipe
        Recipe.objects.select_for_update().filter(pk=form.instance.pk).exists()

    recipe = form.save()

    for row in plan.deletes:
        row.delete()

    for row_form in plan.updates:
        if row_form.has_changed():
            row_form.save()

    for row_form in plan.inserts:
        row = row_form.save(commit=False)
        row.recipe = recipe
        row.save()

    if not recipe.recipe_ingredients.exists():
        raise ValidationFailed({"__all__": [MISSING_INGREDIENTS]})
    return recipe


def save_recipe(user, data, files=None, recipe: Recipe | None = None) -> Recipe:
    """
    Create or update a recipe and its ingredient rows atomically.

    Args:
        user: The authenticated owner. Ingredient choices are limited to their
            library and new recipes are assigned to them.
        data: Submitted fields: title, product_type, method and the
            ``recipe_ingredients`` formset rows (id, ingredient, quantity,
            DELETE plus the management form).
        files: Uploaded files (photo), if any.
        recipe: Existing recipe to update; must already be scoped to user.

    Returns:
        The saved Recipe.

    Raises:
        ValidationFailed: If the recipe or any row is invalid, or no ingredient
            row would remain. Nothing is written, including changes to the
            recipe's own fields.
    """
    form, formset = recipe_forms(user, recipe=recipe, data=data, files=files)

    form_valid = form.is_valid()
    formset_valid = formset.is_valid()
    if not (form_valid and formset_valid):
        errors = collect_errors(form, formset)
        logger.warning(f"Rejected recipe save for user {user.pk}: {sorted(errors)}")
        raise ValidationFailed(errors, form=form, formset=formset)

    plan = plan_rows(formset)
    creating = form.instance.pk is None
    try:
        with transaction.atomic():
            saved = _apply(form, plan)
    except ValidationFailed as e:
        if creating:
            form.instance.pk = None
        logger.warning(f"Rolled back recipe save for user {user.pk}: {e}")
        raise ValidationFailed(e.errors, form=form, formset=formset) from e

    action = "Created" if creating else "Updated"
    logger.info(
        f"{action} recipe {saved.pk} for user {user.pk} "
        f"(+{len(plan.inserts)} -{len(plan.deletes)} rows, {plan.remaining} total)"
    )
    return saved
