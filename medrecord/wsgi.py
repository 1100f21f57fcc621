"""
WSGI config for the MedRecord project.

It exposes the WSGI callable as a module-level variable named ``application``.
Run ``manage.py serve`` (or ``ensure_seed_accounts`` followed by your WSGI
server) so the database is reachable and seeded before traffic arrives.
"""
import os

from django.core.wsgi import get_wsgi_application  # type: ignore

# Set the default settings module for the 'django' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'medrecord.settings')

# Obtain the WSGI application for use by the server
application = get_wsgi_application()
