from types import SimpleNamespace

import pytest

INDEX_HTML = '<!doctype html><html><body><div id="root"></div></body></html>'


@pytest.fixture
def site(tmp_path, settings):
    """Point the SPA and upload roots at a throwaway tree."""
    spa = tmp_path / 'public'
    (spa / 'assets').mkdir(parents=True)
    (spa / 'index.html').write_text(INDEX_HTML)
    (spa / 'assets' / 'app.js').write_text('console.log("app");')
    (spa / '.env').write_text('SECRET_KEY=do-not-serve')

    uploads = tmp_path / 'uploads'
    uploads.mkdir()
    (uploads / 'scan.pdf').write_bytes(b'%PDF-1.4 test')

    settings.SPA_ROOT = spa
    settings.MEDIA_ROOT = uploads
    return SimpleNamespace(spa=spa, uploads=uploads, index=INDEX_HTML)
