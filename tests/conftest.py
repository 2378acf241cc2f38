from __future__ import annotations

import json

import pytest

from lease_renewer.config import Config
from lease_renewer.response import RawResponse


def make_raw(status_code: int = 200, payload=None, content_type: str | None = "application/json") -> RawResponse:
    body = payload if isinstance(payload, bytes) else json.dumps(payload if payload is not None else {}).encode("utf-8")
    return RawResponse(status_code, content_type, body)


class FakeTransport:
    """Replays a script of RawResponse objects or exceptions, recording each call."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def dispatch(self, method, url, headers, body, timeouts, tls):
        self.calls.append({"method": method, "url": url, "headers": headers, "body": body,
                           "timeouts": timeouts, "tls": tls})
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def cfg():
    return Config(
        vault_addr="http://vault.test:8200",
        vault_token="s.test-token",
        token_file="/nonexistent/token",
        open_timeout=2.0,
        read_timeout=7.0,
        ssl_verify=True,
        ssl_pem_file=None,
        max_retries=2,
        retry_interval_ms=0,
        lease_ids=None,
        renew_increment_sec=0,
    )
