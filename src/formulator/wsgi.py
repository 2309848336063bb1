"""WSGI config for the formulator project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "formulator.settings")

application = get_wsgi_application()
