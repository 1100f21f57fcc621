"""
ASGI config for the MedRecord project.

Only plain HTTP is served; the same middleware chain and URL table apply
as under WSGI.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medrecord.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()
