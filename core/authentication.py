"""
Token authentication for the API handler groups.

The single-page client sends ``Authorization: Bearer <key>``; the keys are
ordinary DRF auth tokens issued by ``/api/auth/login``.  Keeping the class
in its own module lets the REST framework settings import it without
pulling in any views.
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """DRF token authentication using the ``Bearer`` keyword."""

    keyword = 'Bearer'
