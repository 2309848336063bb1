from django import forms

from recipes.models import Recipe

from .models import Batch


class BatchForm(forms.ModelForm):
    class Meta:
        model = Batch
        fields = ["recipe", "made_on", "notes"]
        widgets = {
            "made_on": forms.DateInput(attrs={"type": "date"}),
            "notes": forms.Textarea(attrs={"rows": 4}),
        }

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["recipe"].queryset = Recipe.objects.for_user(user).order_by(
            "title"
        )
