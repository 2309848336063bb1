"""Signup, login and logout."""

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import (
    require_GET,
    require_http_methods,
    require_POST,
)

from core.http import UNPROCESSABLE

from .forms import LoginForm, SignupForm
from .services import end_session, start_session


@require_GET
def user_new(request):
    return render(request, "accounts/signup.html", {"form": SignupForm()})


@require_POST
def user_create(request):
    """Create an account and sign it in."""
    form = SignupForm(request.POST)
    if not form.is_valid():
        return render(
            request, "accounts/signup.html", {"form": form}, status=UNPROCESSABLE
        )
    user = form.save()
    start_session(request, user)
    messages.success(request, "Welcome! Your account has been created.")
    return redirect("dashboard")


@require_GET
def session_new(request):
    if request.user.is_authenticated:
        return redirect("dashboard")
    form = LoginForm(request=request)
    return render(
        request,
        "accounts/login.html",
        {"form": form, "next": request.GET.get("next", "")},
    )


@require_http_methods(["POST", "DELETE"])
def session(request):
    """POST signs in; DELETE signs out."""
    if request.method == "DELETE":
        return session_destroy(request)

    form = LoginForm(request.POST, request=request)
    if not form.is_valid():
        return render(
            request,
            "accounts/login.html",
            {"form": form, "next": request.POST.get("next", "")},
            status=UNPROCESSABLE,
        )
    start_session(request, form.user)
    next_url = request.POST.get("next", "")
    if next_url.startswith("/") and not next_url.startswith("//"):
        return redirect(next_url)
    return redirect("dashboard")


@require_http_methods(["POST", "DELETE"])
def session_destroy(request):
    end_session(request)
    return redirect("session_new", permanent=False)
