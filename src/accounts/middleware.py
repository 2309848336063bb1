import logging

from django.contrib.auth import logout

from .services import current_login_session

logger = logging.getLogger(__name__)


class LoginSessionMiddleware:
    """
    Log out requests whose LoginSession row no longer exists.

    Must run after AuthenticationMiddleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.user.is_authenticated and current_login_session(request) is None:
            logger.info(f"Revoked session for user {request.user.pk}")
            logout(request)
        return self.get_response(request)
