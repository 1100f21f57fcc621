import pytest
from django.urls import resolve

from core.routers import API_ROUTES, api_urlpatterns, has_prefix


def test_route_table_holds_the_six_groups():
    assert [entry.prefix for entry in API_ROUTES] == [
        '/api/auth',
        '/api/users',
        '/api/clinical',
        '/api/admin',
        '/api/messages',
        '/api/notifications',
    ]
    assert len(api_urlpatterns()) == len(API_ROUTES)


def test_has_prefix_matches_on_segment_boundaries():
    assert has_prefix('/api/clinical/patients', '/api/clinical')
    assert has_prefix('/api/messages', '/api/messages')
    assert not has_prefix('/api/authority', '/api/auth')
    assert not has_prefix('/uploads/a.png', '/api')


def test_group_routes_resolve_and_misses_reach_fallback():
    assert resolve('/api/auth/login').url_name == 'login_view'
    assert resolve('/api/messages').url_name == 'messages_inbox'
    assert resolve('/api/notifications/7/read').url_name == 'notifications_read'
    assert resolve('/api/ping').url_name == 'ping'
    assert resolve('/api/auth/unknown').url_name == 'fallback'
    assert resolve('/api/authlogin').url_name == 'fallback'
    assert resolve('/api/authority').url_name == 'fallback'
    assert resolve('/patients/42').url_name == 'fallback'


@pytest.mark.urls('core.tests.urls_nested')
def test_longest_prefix_wins():
    assert resolve('/api/admin/reports/q1').url_name == 'nested_reports_q1'
    assert resolve('/api/admin/users').url_name == 'nested_admin_users'
    assert resolve('/api/admin/reports/q2').url_name == 'nested_admin_shadow'
    assert resolve('/api/adminx').url_name == 'fallback'
