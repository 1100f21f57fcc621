from datetime import datetime, timedelta

import pytest
from django.test import Client
from django.utils import timezone


def test_ping_reports_ok_and_current_time():
    # no django_db mark: liveness must work without storage access
    r = Client().get('/api/ping')
    assert r.status_code == 200
    data = r.json()
    assert data['status'] == 'ok'
    reported = datetime.fromisoformat(data['time'])
    assert abs(timezone.now() - reported) < timedelta(seconds=30)


def test_ping_answers_head():
    r = Client().head('/api/ping')
    assert r.status_code == 200
    assert r['Content-Type'] == 'application/json'


@pytest.mark.parametrize('method', ['post', 'put', 'delete'])
def test_ping_other_methods_get_api_not_found(method):
    r = getattr(Client(), method)('/api/ping')
    assert r.status_code == 404
    assert r.json() == {'msg': 'API endpoint not found', 'url': '/api/ping', 'method': method.upper()}
