"""URL configuration for the BiteLogs API.

All API routes live under ``/api/`` and are declared in ``core.urls``.
Uploaded images are served from ``MEDIA_URL`` when running with DEBUG on;
in production a reverse proxy serves that directory.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path

urlpatterns = [
    path("api/", include("core.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
