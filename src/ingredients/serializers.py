"""JSON representations for the ingredient endpoints."""

from core.attachments import photo_url


def tag_to_dict(tag) -> dict:
    return {"id": tag.pk, "name": tag.name}


def ingredient_to_dict(ingredient) -> dict:
    return {
        "id": ingredient.pk,
        "name": ingredient.name,
        "category": ingredient.category,
        "description": ingredient.description,
        "notes": ingredient.notes,
        "tags": [tag_to_dict(tag) for tag in ingredient.tags.all()],
        "photo_url": photo_url(ingredient),
        "created_at": ingredient.created_at.isoformat(),
        "updated_at": ingredient.updated_at.isoformat(),
    }
