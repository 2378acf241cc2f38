from __future__ import annotations

import pytest
import requests

from lease_renewer.errors import TransportError
from lease_renewer.transport import HttpTransport, Timeouts, TlsMaterial


def _make_response(status_code: int, body: bytes, content_type: str | None) -> requests.Response:
    r = requests.Response()
    r.status_code = status_code
    r.url = "http://vault.test"
    r._content = body  # type: ignore[attr-defined]
    if content_type is not None:
        r.headers["Content-Type"] = content_type
    return r


def test_dispatch_passes_request_arguments(monkeypatch):
    seen = {}

    def fake_request(method, url, **kwargs):
        seen.update(kwargs, method=method, url=url)
        return _make_response(200, b"{}", "application/json; charset=utf-8")

    monkeypatch.setattr(requests, "request", fake_request)

    raw = HttpTransport().dispatch(
        "PUT", "http://vault.test/v1/sys/renew/x", {"X-Vault-Token": "t"}, b'{"increment":"10s"}',
        Timeouts(1.0, 2.0), TlsMaterial(True, "/etc/ssl/vault-ca.pem"),
    )

    assert seen["method"] == "PUT"
    assert seen["headers"] == {"X-Vault-Token": "t"}
    assert seen["data"] == b'{"increment":"10s"}'
    assert seen["timeout"] == (1.0, 2.0)
    assert seen["verify"] == "/etc/ssl/vault-ca.pem"
    assert raw.status_code == 200
    assert raw.content_type == "application/json"
    assert raw.body == b"{}"


def test_dispatch_missing_content_type(monkeypatch):
    monkeypatch.setattr(requests, "request", lambda *a, **kw: _make_response(204, b"", None))
    raw = HttpTransport().dispatch("PUT", "http://vault.test", {}, None, Timeouts(), TlsMaterial(False))
    assert raw.content_type is None


def test_dispatch_wraps_request_errors(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "request", boom)
    with pytest.raises(TransportError) as ei:
        HttpTransport().dispatch("PUT", "http://vault.test", {}, None, Timeouts(), TlsMaterial())
    assert isinstance(ei.value.__cause__, requests.ConnectionError)


def test_tls_verify_flag():
    assert TlsMaterial(False).requests_verify is False
    assert TlsMaterial(True).requests_verify is True


def test_dispatch_uses_injected_session(monkeypatch):
    session = requests.Session()
    calls = []

    def fake_request(method, url, **kwargs):
        calls.append((method, url, kwargs["timeout"]))
        return _make_response(200, b'{"data": null}', "application/json")

    def module_request(*args, **kwargs):
        raise AssertionError("module-level requests.request must not be used")

    monkeypatch.setattr(session, "request", fake_request)
    monkeypatch.setattr(requests, "request", module_request)

    raw = HttpTransport(session).dispatch("PUT", "http://vault.test/v1/sys/renew/x", {}, None,
                                          Timeouts(3.0, 4.0), TlsMaterial())
    assert calls == [("PUT", "http://vault.test/v1/sys/renew/x", (3.0, 4.0))]
    assert raw.body == b'{"data": null}'
