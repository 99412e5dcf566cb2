"""ASGI config for the BiteLogs API."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bitelogs_service.settings")

application = get_asgi_application()
