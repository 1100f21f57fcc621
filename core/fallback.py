"""
Fallback dispatcher for requests no API handler group resolved.

The dispatcher walks an ordered tuple of stages.  Each stage inspects the
request and either returns ``Handled(response)`` or ``UNRESOLVED``; the
first handled response wins.  Order matters:

1. ``api_miss``      - anything under ``/api`` gets a JSON 404
2. ``upload_miss``   - ``/uploads/*`` serves the file or a plain-text 404,
                       never the app shell
3. ``static_hit``    - existing files below the SPA root
4. ``spa_fallback``  - GET navigation receives the entry document
5. ``generic_miss``  - everything else is a 404
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.http import Http404, HttpRequest, HttpResponse, HttpResponseNotFound, JsonResponse
from django.views.static import serve

from .routers import has_prefix

logger = logging.getLogger(__name__)

GET_LIKE = ('GET', 'HEAD')


@dataclass(frozen=True)
class FallbackConfig:
    api_prefix: str
    upload_prefix: str
    upload_root: Path
    static_root: Path
    entry_document: str = 'index.html'

    @classmethod
    def from_settings(cls) -> 'FallbackConfig':
        return cls(
            api_prefix=settings.API_PREFIX,
            upload_prefix=settings.MEDIA_URL.rstrip('/'),
            upload_root=Path(settings.MEDIA_ROOT),
            static_root=Path(settings.SPA_ROOT),
            entry_document=settings.SPA_ENTRY_DOCUMENT,
        )

    @property
    def entry_path(self) -> Path:
        return self.static_root / self.entry_document


@dataclass(frozen=True)
class Handled:
    response: HttpResponse


class Unresolved:
    def __repr__(self) -> str:
        return 'UNRESOLVED'


UNRESOLVED = Unresolved()

Outcome = Union[Handled, Unresolved]
Stage = Callable[[HttpRequest, FallbackConfig], Outcome]


def _serve_file(request: HttpRequest, name: str, root: Path) -> Optional[HttpResponse]:
    """Serve ``name`` from ``root`` or return None when there is no such file."""
    try:
        return serve(request, name, document_root=str(root))
    except (Http404, SuspiciousFileOperation):
        return None


def _entry_document(config: FallbackConfig, status: int) -> Optional[HttpResponse]:
    try:
        content = config.entry_path.read_bytes()
    except OSError:
        return None
    return HttpResponse(content, content_type='text/html; charset=utf-8', status=status)


def api_miss(request: HttpRequest, config: FallbackConfig) -> Outcome:
    if not has_prefix(request.path_info, config.api_prefix):
        return UNRESOLVED
    return Handled(JsonResponse(
        {'msg': 'API endpoint not found', 'url': request.get_full_path(), 'method': request.method},
        status=404,
    ))


def upload_miss(request: HttpRequest, config: FallbackConfig) -> Outcome:
    if not has_prefix(request.path_info, config.upload_prefix):
        return UNRESOLVED
    if request.method in GET_LIKE:
        name = request.path_info[len(config.upload_prefix):].lstrip('/')
        response = _serve_file(request, name, config.upload_root) if name else None
        if response is not None:
            return Handled(response)
    return Handled(HttpResponseNotFound('File Not Found', content_type='text/plain; charset=utf-8'))


def static_hit(request: HttpRequest, config: FallbackConfig) -> Outcome:
    if request.method not in GET_LIKE:
        return UNRESOLVED
    name = request.path_info.lstrip('/')
    # dotfiles are never served
    if not name or any(part.startswith('.') for part in name.split('/')):
        return UNRESOLVED
    response = _serve_file(request, name, config.static_root)
    return Handled(response) if response is not None else UNRESOLVED


def spa_fallback(request: HttpRequest, config: FallbackConfig) -> Outcome:
    if request.method not in GET_LIKE or has_prefix(request.path_info, config.api_prefix):
        return UNRESOLVED
    response = _entry_document(config, status=200)
    return Handled(response) if response is not None else UNRESOLVED


def generic_miss(request: HttpRequest, config: FallbackConfig) -> Outcome:
    if request.method in GET_LIKE and not has_prefix(request.path_info, config.api_prefix):
        # let the client app render its own not-found view when it can
        response = _entry_document(config, status=404)
        if response is not None:
            return Handled(response)
        logger.warning('SPA entry document %s is missing', config.entry_path)
    return Handled(JsonResponse({'msg': 'Not Found'}, status=404))


DEFAULT_STAGES: tuple[Stage, ...] = (api_miss, upload_miss, static_hit, spa_fallback, generic_miss)


@dataclass(frozen=True)
class FallbackDispatcher:
    """Catch-all view running the fallback stages in order.

    Without an explicit ``config`` the settings are read per request, which
    keeps ``override_settings`` usable in tests.
    """
    config: Optional[FallbackConfig] = None
    stages: tuple[Stage, ...] = field(default=DEFAULT_STAGES)

    def __call__(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        config = self.config or FallbackConfig.from_settings()
        for stage in self.stages:
            outcome = stage(request, config)
            if isinstance(outcome, Handled):
                return outcome.response
        return JsonResponse({'msg': 'Not Found'}, status=404)
