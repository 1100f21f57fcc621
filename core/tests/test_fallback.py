"""
Fallback dispatcher behaviour for requests no handler group resolved.

None of these tests touch the database: API misses, uploads, static
files and the SPA shell are all decided without storage.
"""
import pytest
from django.http import HttpResponse
from django.test import Client, RequestFactory

from core.fallback import (
    DEFAULT_STAGES,
    UNRESOLVED,
    FallbackConfig,
    FallbackDispatcher,
    Handled,
    api_miss,
    spa_fallback,
    upload_miss,
)


def body(response) -> bytes:
    if response.streaming:
        return b''.join(response.streaming_content)
    return response.content


@pytest.fixture
def client():
    return Client()


@pytest.mark.parametrize('method', ['get', 'post', 'put', 'delete'])
def test_unknown_api_path_returns_json_404(client, site, method):
    r = getattr(client, method)('/api/does-not-exist/deep?x=1')
    assert r.status_code == 404
    assert r['Content-Type'].startswith('application/json')
    data = r.json()
    assert data['msg'] == 'API endpoint not found'
    assert data['url'] == '/api/does-not-exist/deep?x=1'
    assert data['method'] == method.upper()


def test_registered_prefix_without_subroute_is_api_miss(client, site):
    r = client.post('/api/auth/unknown-action', {'a': 1}, content_type='application/json')
    assert r.status_code == 404
    assert r.json() == {'msg': 'API endpoint not found', 'url': '/api/auth/unknown-action', 'method': 'POST'}


def test_bare_api_prefix_is_api_miss(client, site):
    r = client.get('/api')
    assert r.status_code == 404
    assert r.json()['url'] == '/api'


def test_path_merely_starting_with_api_letters_is_navigation(client, site):
    r = client.get('/apiary')
    assert r.status_code == 200
    assert body(r).decode() == site.index


def test_missing_upload_is_plain_text_404_not_app_shell(client, site):
    r = client.get('/uploads/missing/photo.png')
    assert r.status_code == 404
    assert r['Content-Type'].startswith('text/plain')
    assert r.content == b'File Not Found'
    assert b'<html' not in r.content


def test_existing_upload_is_served(client, site):
    r = client.get('/uploads/scan.pdf')
    assert r.status_code == 200
    assert body(r) == b'%PDF-1.4 test'


def test_upload_namespace_rejects_other_methods(client, site):
    r = client.post('/uploads/scan.pdf')
    assert r.status_code == 404
    assert r.content == b'File Not Found'


def test_static_asset_is_served(client, site):
    r = client.get('/assets/app.js')
    assert r.status_code == 200
    assert body(r) == b'console.log("app");'


def test_dotfiles_are_never_served(client, site):
    r = client.get('/.env')
    assert r.status_code == 200
    content = body(r)
    assert b'SECRET_KEY' not in content
    assert content.decode() == site.index


@pytest.mark.parametrize('url', ['/', '/patients/42', '/admin/dashboard?tab=users'])
def test_navigation_gets_spa_entry_document(client, site, url):
    r = client.get(url)
    assert r.status_code == 200
    assert r['Content-Type'].startswith('text/html')
    assert body(r).decode() == site.index
    assert 'Content-Disposition' not in r


@pytest.mark.parametrize('method', ['post', 'put', 'patch', 'delete'])
def test_non_get_outside_api_is_404(client, site, method):
    r = getattr(client, method)('/patients/42')
    assert r.status_code == 404
    assert r.json() == {'msg': 'Not Found'}


def test_missing_entry_document_falls_to_generic_404(client, site):
    (site.spa / 'index.html').unlink()
    r = client.get('/patients/42')
    assert r.status_code == 404
    assert r.json() == {'msg': 'Not Found'}


def make_config(site) -> FallbackConfig:
    return FallbackConfig(
        api_prefix='/api',
        upload_prefix='/uploads',
        upload_root=site.uploads,
        static_root=site.spa,
    )


def test_stages_report_unresolved_outside_their_namespace(site):
    config = make_config(site)
    request = RequestFactory().get('/patients')
    assert api_miss(request, config) is UNRESOLVED
    assert upload_miss(request, config) is UNRESOLVED
    assert isinstance(spa_fallback(request, config), Handled)


def test_spa_fallback_never_answers_api_paths(site):
    request = RequestFactory().get('/api/anything')
    assert spa_fallback(request, make_config(site)) is UNRESOLVED


def test_dispatcher_stops_at_first_handled_stage(site):
    calls = []

    def first(request, config):
        calls.append('first')
        return UNRESOLVED

    def second(request, config):
        calls.append('second')
        return Handled(HttpResponse('second', status=418))

    def third(request, config):  # pragma: no cover - must not run
        calls.append('third')
        return Handled(HttpResponse('third'))

    dispatcher = FallbackDispatcher(config=make_config(site), stages=(first, second, third))
    r = dispatcher(RequestFactory().get('/x'))
    assert r.status_code == 418
    assert calls == ['first', 'second']


def test_default_stage_order():
    names = [stage.__name__ for stage in DEFAULT_STAGES]
    assert names == ['api_miss', 'upload_miss', 'static_hit', 'spa_fallback', 'generic_miss']
