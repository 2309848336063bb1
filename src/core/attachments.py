"""
Photo attachments for user-owned records.

A photo is an optional file stored in Django's default storage and referenced
from exactly one row through a ``PhotoField``. The file lives as long as the
row: it is removed when the row is deleted (directly or by cascade) and when
a new upload replaces it.
"""

import logging
import uuid
from pathlib import PurePosixPath

from django.apps import apps
from django.db import models, transaction
from django.db.models.signals import post_delete, pre_save

logger = logging.getLogger(__name__)


def photo_upload_to(instance, filename: str) -> str:
    """Build a collision-free storage key: photos/<model>/<uuid><ext>."""
    suffix = PurePosixPath(filename).suffix.lower()
    return f"photos/{instance._meta.model_name}/{uuid.uuid4().hex}{suffix}"


class PhotoField(models.FileField):
    """Optional photo attached to a single owning row."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("upload_to", photo_upload_to)
        kwargs.setdefault("blank", True)
        kwargs.setdefault("max_length", 255)
        super().__init__(*args, **kwargs)


def photo_url(instance, field_name: str = "photo") -> str | None:
    """Return the display URL for an attached photo, or None."""
    photo = getattr(instance, field_name, None)
    if not photo:
        return None
    return photo.url


def photo_fields(model) -> list[str]:
    return [f.name for f in model._meta.get_fields() if isinstance(f, PhotoField)]


def _delete_file_on_commit(storage, name: str) -> None:
    def delete():
        storage.delete(name)
        logger.info(f"Deleted photo {name}")

    transaction.on_commit(delete)


def delete_photos_with_owner(sender, instance, **kwargs):
    """post_delete: remove attached files once the deletion commits."""
    for field_name in photo_fields(sender):
        photo = getattr(instance, field_name)
        if photo:
            _delete_file_on_commit(photo.storage, photo.name)


def delete_replaced_photos(sender, instance, **kwargs):
    """pre_save: remove the previous file when a photo is replaced or cleared."""
    if instance.pk is None or kwargs.get("raw"):
        return
    names = photo_fields(sender)
    previous = sender._base_manager.filter(pk=instance.pk).values(*names).first()
    if previous is None:
        return
    for field_name in names:
        old_name = previous[field_name]
        new_file = getattr(instance, field_name)
        if old_name and old_name != new_file.name:
            _delete_file_on_commit(new_file.storage, old_name)


def connect_photo_signals() -> None:
    """Hook file cleanup into every installed model that carries a PhotoField."""
    for model in apps.get_models():
        if not photo_fields(model):
            continue
        post_delete.connect(
            delete_photos_with_owner,
            sender=model,
            dispatch_uid=f"photo_cleanup_delete_{model._meta.label_lower}",
        )
        pre_save.connect(
            delete_replaced_photos,
            sender=model,
            dispatch_uid=f"photo_cleanup_replace_{model._meta.label_lower}",
        )
