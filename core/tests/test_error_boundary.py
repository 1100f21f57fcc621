import logging

import pytest
from django.test import Client

pytestmark = pytest.mark.urls('core.tests.urls_failing')


def boundary_records(caplog):
    return [rec for rec in caplog.records if rec.name == 'core.middleware' and rec.levelno == logging.ERROR]


def test_plain_view_failure_becomes_one_json_500(caplog):
    with caplog.at_level(logging.ERROR, logger='core.middleware'):
        r = Client().get('/api/test/explode')
    assert r.status_code == 500
    assert r.json() == {'msg': 'Server error', 'details': 'kaboom'}
    assert b'Traceback' not in r.content
    records = boundary_records(caplog)
    assert len(records) == 1
    assert records[0].exc_info is not None


def test_failure_inside_api_handler_reaches_the_boundary(caplog):
    with caplog.at_level(logging.ERROR, logger='core.middleware'):
        r = Client().get('/api/test/explode-api')
    assert r.status_code == 500
    assert r.json()['msg'] == 'Server error'
    assert 'patient_id' in r.json()['details']
    assert len(boundary_records(caplog)) == 1


def test_api_errors_keep_their_status_in_the_envelope(caplog):
    with caplog.at_level(logging.ERROR, logger='core.middleware'):
        r = Client().get('/api/test/reject')
    assert r.status_code == 400
    assert r.json() == {'msg': 'Invalid request', 'details': {'phone': ['This field is required.']}}
    assert boundary_records(caplog) == []


def test_unauthenticated_api_call_uses_envelope():
    r = Client().get('/api/users/me')
    assert r.status_code == 401
    assert set(r.json()) == {'msg'}
