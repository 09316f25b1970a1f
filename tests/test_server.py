"""
Tests for the HTTP adapter.

Uses FastAPI's TestClient against the real app; redirects are not followed
so the Location header can be checked.
"""

import pytest
from fastapi.testclient import TestClient

from shortcuts.server import SECURITY_HEADERS, create_app


@pytest.fixture
def client():
    return TestClient(create_app(), follow_redirects=False)


class TestRedirects:
    def test_query_redirects_with_303(self, client):
        response = client.get("/", params={"q": "gh rust-lang/rust #1"})
        assert response.status_code == 303
        assert response.headers["location"] == "https://github.com/rust-lang/rust/issues/1"

    def test_search_fallback_location(self, client):
        response = client.get("/", params={"q": "lol/donkey"})
        assert response.status_code == 303
        assert response.headers["location"] == "https://duckduckgo.com/?k1=-1&q=lol%2Fdonkey"

    def test_keyword_redirect(self, client):
        response = client.get("/", params={"q": "Weather "})
        assert response.status_code == 303
        assert response.headers["location"].startswith("https://beta.bom.gov.au/")

    def test_empty_query_is_still_a_search(self, client):
        response = client.get("/?q=")
        assert response.status_code == 303
        assert response.headers["location"] == "https://duckduckgo.com/?k1=-1&q="

    def test_build_error_is_not_redirected(self, client):
        response = client.get("/", params={"q": "ap ABC\x00"})
        assert response.status_code == 500
        assert "location" not in response.headers


class TestStaticPages:
    def test_landing_page_without_query(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'name="q"' in response.text

    def test_opensearch_description(self, client):
        response = client.get("/osdf.xml")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/opensearchdescription+xml")
        assert "{searchTerms}" in response.text

    def test_unknown_path_is_404(self, client):
        assert client.get("/nope").status_code == 404

    def test_api_docs_are_disabled(self, client):
        assert client.get("/docs").status_code == 404


class TestSecurityHeaders:
    @pytest.mark.parametrize("path", ["/", "/osdf.xml", "/?q=x", "/nope"])
    def test_headers_on_every_response(self, client, path):
        response = client.get(path)
        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value

    def test_feature_policy_disables_camera(self, client):
        response = client.get("/")
        assert "camera 'none'" in response.headers["feature-policy"]


class TestEntryPoint:
    """main() wires settings into uvicorn without starting a real server."""

    def test_runs_uvicorn_with_settings(self, tmp_path, monkeypatch):
        from shortcuts import config

        calls = []
        monkeypatch.setattr(config.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
        monkeypatch.setenv("SHORTCUTS_SETTINGS", str(tmp_path / "missing.toml"))
        monkeypatch.setenv("BIND_ADDR", "127.0.0.1:9999")
        monkeypatch.delenv("TLS_KEY_FILE", raising=False)
        monkeypatch.delenv("TLS_CERT_FILE", raising=False)

        assert config.main() == 0
        assert calls == [{"host": "127.0.0.1", "port": 9999, "log_config": None}]

    def test_invalid_bind_addr_exits_nonzero(self, tmp_path, monkeypatch):
        from shortcuts import config

        monkeypatch.setattr(config.uvicorn, "run", lambda app, **kwargs: pytest.fail("server started"))
        monkeypatch.setenv("SHORTCUTS_SETTINGS", str(tmp_path / "missing.toml"))
        monkeypatch.setenv("BIND_ADDR", "nonsense")
        monkeypatch.delenv("TLS_KEY_FILE", raising=False)
        monkeypatch.delenv("TLS_CERT_FILE", raising=False)

        assert config.main() == 1

    def test_runs_as_a_module(self, tmp_path, monkeypatch):
        import runpy

        from shortcuts import config

        calls = []
        monkeypatch.setattr(config.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
        monkeypatch.setenv("SHORTCUTS_SETTINGS", str(tmp_path / "missing.toml"))
        monkeypatch.setenv("BIND_ADDR", "127.0.0.1:9998")
        monkeypatch.delenv("TLS_KEY_FILE", raising=False)
        monkeypatch.delenv("TLS_CERT_FILE", raising=False)

        with pytest.raises(SystemExit) as excinfo:
            runpy.run_module("shortcuts", run_name="__main__")
        assert excinfo.value.code == 0
        assert calls == [{"host": "127.0.0.1", "port": 9998, "log_config": None}]
