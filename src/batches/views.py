"""Batch log views. Batches are logged and viewed, not edited."""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET, require_http_methods

from core.exceptions import ValidationFailed
from core.http import UNPROCESSABLE
from core.services import save_owned

from .forms import BatchForm
from .models import Batch


def _user_batches(request):
    return Batch.objects.for_user(request.user).select_related("recipe")


@login_required
@require_http_methods(["GET", "POST"])
def batch_list(request):
    """GET lists batches, most recent first; POST logs one."""
    if request.method == "POST":
        form = BatchForm(request.POST, user=request.user)
        try:
            save_owned(form, request.user)
        except ValidationFailed as e:
            return render(
                request,
                "batches/batch_form.html",
                {"form": e.form},
                status=UNPROCESSABLE,
            )
        messages.success(request, "Batch was successfully logged.")
        return redirect("batch_list")

    return render(
        request, "batches/batch_list.html", {"batches": _user_batches(request)}
    )


@login_required
@require_GET
def batch_new(request):
    """Blank batch form dated today, optionally preselecting ?recipe_id=."""
    initial = {"made_on": timezone.localdate()}
    recipe_id = request.GET.get("recipe_id")
    if recipe_id:
        initial["recipe"] = recipe_id
    form = BatchForm(initial=initial, user=request.user)
    return render(request, "batches/batch_form.html", {"form": form})


@login_required
@require_GET
def batch_detail(request, pk):
    batch = get_object_or_404(_user_batches(request), pk=pk)
    return render(request, "batches/batch_detail.html", {"batch": batch})
