"""
Route table for the API handler groups.

Each group owns everything below its prefix.  The table is fixed at import
time; ``api_urlpatterns`` turns it into ``include()`` entries for the root
URLconf.  A group whose own patterns do not match a path leaves the request
unresolved and Django's resolver moves on to the fallback dispatcher.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Union

from django.conf import settings
from django.urls import include, re_path


class RouteEntry(NamedTuple):
    prefix: str
    urlconf: Union[str, list]


API_PREFIX: str = getattr(settings, 'API_PREFIX', '/api')

API_ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry('/api/auth', 'core.urls.auth'),
    RouteEntry('/api/users', 'core.urls.users'),
    RouteEntry('/api/clinical', 'core.urls.clinical'),
    RouteEntry('/api/admin', 'core.urls.admin'),
    RouteEntry('/api/messages', 'core.urls.messages'),
    RouteEntry('/api/notifications', 'core.urls.notifications'),
)


def has_prefix(url_path: str, prefix: str) -> bool:
    """True when ``url_path`` is ``prefix`` itself or lies below it."""
    prefix = prefix.rstrip('/')
    return url_path == prefix or url_path.startswith(prefix + '/')


def api_urlpatterns(routes: tuple[RouteEntry, ...] = API_ROUTES) -> list:
    # Longest prefix first so that nested prefixes can never be shadowed.
    ordered = sorted(routes, key=lambda entry: len(entry.prefix), reverse=True)
    return [
        re_path(rf'^{re.escape(entry.prefix.lstrip("/"))}(?:/|$)', include(entry.urlconf))
        for entry in ordered
    ]
