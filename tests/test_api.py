"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from tidyoutput.config.cleanup.models import DISABLED, DOM
from tidyoutput.config.settings import get_settings
from tidyoutput.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def small_limit(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAX_CONTENT_LENGTH", "10")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_strategies_listing(client):
    body = client.get("/clean/strategies").json()
    names = [s["name"] for s in body["strategies"]]
    assert names[-1] == DISABLED
    assert DOM in names
    assert body["strategies"][0]["recommended"] is True


def test_clean_with_inline_method(client):
    resp = client.post(
        "/clean",
        json={"content": "<span>test</span><span></span>", "options": {"method": DOM}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body == {"content": "<span>test</span>", "method": DOM, "changed": True}


def test_clean_comment_with_indent(client):
    resp = client.post(
        "/clean",
        json={"content": "a\nb", "kind": "comment", "profile": "passthrough", "options": {"indent_comment": 1}},
    )
    assert resp.json()["content"] == "a\n    b"


def test_passthrough_profile_unchanged(client):
    resp = client.post("/clean", json={"content": "<p><span></span>", "profile": "passthrough"})
    body = resp.json()
    assert body["content"] == "<p><span></span>"
    assert body["changed"] is False


def test_invalid_kind(client):
    resp = client.post("/clean", json={"content": "<p>x</p>", "kind": "sidebar"})
    assert resp.status_code == 422


def test_unknown_profile(client):
    resp = client.post("/clean", json={"content": "<p>x</p>", "profile": "missing"})
    assert resp.status_code == 400


def test_content_too_large(small_limit, client):
    resp = client.post("/clean", json={"content": "<p>far too long</p>", "profile": "passthrough"})
    assert resp.status_code == 413
