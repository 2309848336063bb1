"""
Session lifecycle for signed-in browsers.

Every login (signup, the login form, the admin, test clients) records a
LoginSession through the ``user_logged_in`` signal, and every logout deletes
it through ``user_logged_out``.
"""

import logging

from django.contrib.auth import login, logout
from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.dispatch import receiver

from .models import LoginSession

logger = logging.getLogger(__name__)

SESSION_KEY = "login_session_id"


def _client_ip(request) -> str | None:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        return forwarded.split(",")[0].strip() or None
    return request.META.get("REMOTE_ADDR") or None


@receiver(user_logged_in, dispatch_uid="accounts_record_login_session")
def record_login_session(sender, request, user, **kwargs):
    if request is None or not hasattr(request, "session"):
        return
    login_session = LoginSession.objects.create(
        user=user,
        ip_address=_client_ip(request),
        user_agent=request.headers.get("User-Agent", "")[:255],
    )
    request.session[SESSION_KEY] = login_session.pk
    logger.info(f"Started session {login_session.pk} for user {user.pk}")


@receiver(user_logged_out, dispatch_uid="accounts_forget_login_session")
def forget_login_session(sender, request, user, **kwargs):
    if request is None or not hasattr(request, "session"):
        return
    login_session_id = request.session.get(SESSION_KEY)
    if login_session_id:
        LoginSession.objects.filter(pk=login_session_id).delete()
        logger.info(f"Ended session {login_session_id}")


def start_session(request, user) -> LoginSession:
    """
    Sign user in on this request.

    Returns:
        The LoginSession row backing the new session.
    """
    login(request, user, backend="django.contrib.auth.backends.ModelBackend")
    return LoginSession.objects.get(pk=request.session[SESSION_KEY])


def end_session(request) -> None:
    """Sign out and forget the browser's LoginSession."""
    logout(request)


def current_login_session(request) -> LoginSession | None:
    """
    Resolve the LoginSession behind an authenticated request.

    Returns None when the request is anonymous or its LoginSession row has been
    deleted.
    """
    if not request.user.is_authenticated:
        return None
    login_session_id = request.session.get(SESSION_KEY)
    if not login_session_id:
        return None
    return LoginSession.objects.filter(
        pk=login_session_id, user=request.user
    ).first()
