"""ASGI config for the formulator project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "formulator.settings")

application = get_asgi_application()
