"""
Cross-cutting request handling shared by every route.

See ``settings.MIDDLEWARE`` for the order these run in; pre-flight
handling must stay directly behind the CORS middleware.
"""
from __future__ import annotations

import json
import logging

from django.core.exceptions import RequestDataTooBig, SuspiciousOperation
from django.http import HttpResponse, QueryDict
from django.utils import timezone

from .exceptions import BodyDecodeError, error_response

logger = logging.getLogger(__name__)
access_logger = logging.getLogger('medrecord.access')


def boundary_response(request, exception):
    """Log ``exception`` with its traceback and return the JSON 500 envelope."""
    logger.error(
        'SERVER ERROR on %s %s', request.method, request.get_full_path(),
        exc_info=(type(exception), exception, exception.__traceback__),
    )
    return error_response('Server error', str(exception), status=500)


class PreflightMiddleware:
    """Answer every OPTIONS request with an empty 204.

    ``CorsMiddleware`` sits in front of this and adds the allow-origin and
    allow-credentials headers to the response on its way out.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.method == 'OPTIONS':
            response = HttpResponse(status=204)
            response['Content-Length'] = '0'
            return response
        return self.get_response(request)


class BodyDecodingMiddleware:
    """Decode JSON and urlencoded bodies onto ``request.decoded_body``.

    Malformed payloads are rejected here with a 4xx envelope so handlers
    only ever see bodies that parsed.  Plain Django views can read the result
    from ``request.decoded_body``; the DRF handler groups parse the same
    bytes again through ``request.data``, so for them this pass only
    validates the body.
    """
    FORM_TYPES = ('application/x-www-form-urlencoded',)

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        try:
            request.decoded_body = self.decode(request)
        except RequestDataTooBig as exc:
            return error_response('Request body too large', str(exc), status=413)
        except (BodyDecodeError, SuspiciousOperation) as exc:
            return error_response('Invalid request body', str(exc), status=400)
        except Exception as exc:
            return boundary_response(request, exc)
        return self.get_response(request)

    def decode(self, request):
        content_type = (request.content_type or '').lower()
        if content_type == 'application/json' or content_type.endswith('+json'):
            raw = request.body
            if not raw.strip():
                return None
            try:
                return json.loads(raw)
            except ValueError as exc:
                raise BodyDecodeError(f'Malformed JSON: {exc}') from exc
        if content_type in self.FORM_TYPES:
            # request.POST is only populated for POST
            return QueryDict(request.body, encoding=request.encoding).dict()
        return None


class AccessLogMiddleware:
    """Log ``[timestamp] METHOD path`` for each request that got past decoding."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        access_logger.info('[%s] %s %s', timezone.now().isoformat(), request.method, request.get_full_path())
        return self.get_response(request)


class ErrorBoundaryMiddleware:
    """Convert any exception a view let escape into one JSON 500 envelope.

    Django converts exceptions raised by other middleware before this hook
    runs, so the middleware in this module route their own failures through
    ``boundary_response`` instead.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        return boundary_response(request, exception)
