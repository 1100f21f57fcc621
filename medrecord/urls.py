"""
URL configuration for the MedRecord entry point.

Resolution order: the liveness check, then the API handler groups in the
order of ``core.routers.API_ROUTES``, then the catch-all fallback
dispatcher that separates API misses, uploads, static assets and the
single-page app shell.
"""
from django.urls import path, re_path

from core.fallback import FallbackDispatcher
from core.routers import api_urlpatterns
from core.views import health

urlpatterns = [
    path('api/ping', health.ping, name='ping'),
    *api_urlpatterns(),
    # Anything the groups above did not resolve
    re_path(r'^', FallbackDispatcher(), name='fallback'),
]

handler500 = 'core.exceptions.server_error'
