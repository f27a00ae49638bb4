"""WSGI entry point for the venue project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "venue.settings")

application = get_wsgi_application()
