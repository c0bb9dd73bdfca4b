"""WSGI config for the Lumina project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "lumina.settings")

application = get_wsgi_application()
