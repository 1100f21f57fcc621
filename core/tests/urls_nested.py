"""URLconf with a group nested below another group's prefix."""
from django.http import HttpResponse
from django.urls import path, re_path

from core.fallback import FallbackDispatcher
from core.routers import RouteEntry, api_urlpatterns


def view(request):
    return HttpResponse('ok')


admin_patterns = [
    path('users', view, name='nested_admin_users'),
    # would capture the reports group if the shorter prefix were tried first
    re_path(r'^reports/.*$', view, name='nested_admin_shadow'),
]

report_patterns = [
    path('q1', view, name='nested_reports_q1'),
]

# shorter prefix listed first on purpose
NESTED_ROUTES = (
    RouteEntry('/api/admin', admin_patterns),
    RouteEntry('/api/admin/reports', report_patterns),
)

urlpatterns = [
    *api_urlpatterns(NESTED_ROUTES),
    re_path(r'^', FallbackDispatcher(), name='fallback'),
]
