"""Dashboard view."""

from django.contrib.auth.decorators import login_required
from django.shortcuts import render
from django.views.decorators.http import require_GET

from .services import get_dashboard_stats, get_recent_batches, get_recent_recipes


@login_required
@require_GET
def dashboard(request):
    """Counts plus the most recent recipes and batches."""
    context = {
        "stats": get_dashboard_stats(request.user),
        "recent_recipes": get_recent_recipes(request.user),
        "recent_batches": get_recent_batches(request.user),
    }
    return render(request, "dashboards/show.html", context)
