"""Write helpers shared by the user-owned resources."""

import logging

from django.db import transaction

from .exceptions import ValidationFailed

logger = logging.getLogger(__name__)


def save_owned(form, user):
    """
    Validate and save a ModelForm for a user-owned model.

    The form's ``fields`` list is the allow-list; ownership is always assigned
    here from ``user``, never from submitted data.

    Args:
        form: Bound ModelForm (new or existing instance).
        user: The authenticated owner.

    Returns:
        The saved model instance.

    Raises:
        ValidationFailed: If the form is invalid. Nothing is written.
    """
    if not form.is_valid():
        model_name = form._meta.model._meta.model_name
        logger.warning(
            f"Rejected {model_name} save for user {user.pk}: {list(form.errors)}"
        )
        raise ValidationFailed.from_form(form)

    created = form.instance.pk is None
    with transaction.atomic():
        instance = form.save(commit=False)
        instance.user = user
        instance.save()
        form.save_m2m()

    action = "Created" if created else "Updated"
    model_name = instance._meta.model_name
    logger.info(f"{action} {model_name} {instance.pk} for user {user.pk}")
    return instance


@transaction.atomic
def delete_owned(instance) -> None:
    """Delete a user-owned row and everything that cascades from it."""
    model_name = instance._meta.model_name
    pk = instance.pk
    instance.delete()
    logger.info(f"Deleted {model_name} {pk}")
