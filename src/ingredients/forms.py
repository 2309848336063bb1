from django import forms

from .models import Ingredient, Tag


class IngredientForm(forms.ModelForm):
    tags = forms.ModelMultipleChoiceField(
        queryset=Tag.objects.all(),
        required=False,
        widget=forms.CheckboxSelectMultiple,
    )

    class Meta:
        model = Ingredient
        fields = ["name", "category", "description", "notes", "photo", "tags"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
            "notes": forms.Textarea(attrs={"rows": 3}),
        }


def ingredient_form_data(ingredient) -> dict:
    """Current field values of an ingredient, shaped like submitted form data."""
    return {
        "name": ingredient.name,
        "category": ingredient.category,
        "description": ingredient.description,
        "notes": ingredient.notes,
        "tags": [tag.pk for tag in ingredient.tags.all()],
    }
