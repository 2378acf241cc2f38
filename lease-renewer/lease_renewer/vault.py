import json, time
from typing import Callable
from .config import Config
from .errors import TransportError, UnexpectedStatus, RetriesExhausted
from .jsonlog import jlog
from .response import RenewalResult, decode_renewal
from .timeutil import Increment
from .transport import HttpTransport

RENEW_PATH = "/v1/sys/renew/"

def retry_all(_err: Exception) -> bool:
    return True

def retry_transient(err: Exception) -> bool:
    """Only network failures, 429 and 5xx are worth another attempt."""
    if isinstance(err, TransportError):
        return True
    if isinstance(err, UnexpectedStatus):
        return err.status_code == 429 or err.status_code >= 500
    return False

class VaultClient:
    def __init__(self, cfg: Config, transport=None,
                 is_retryable: Callable[[Exception], bool] = retry_all,
                 sleep: Callable[[float], None] = time.sleep):
        self.cfg = cfg
        self.transport = transport or HttpTransport()
        self.is_retryable, self.sleep = is_retryable, sleep

    def renew_lease(self, lease_id: str, increment: Increment | None = None) -> RenewalResult:
        """PUT /v1/sys/renew/<lease_id>, retrying per the configured policy.

        Returns a RenewalResult whose ``retries`` is the number of failed
        attempts before the successful one. Raises RetriesExhausted once the
        policy gives up; an UnsupportedUnit in ``increment`` raises before any
        request is made.
        """
        policy = self.cfg.retry_policy
        url = f"{self.cfg.vault_addr}{RENEW_PATH}{lease_id}"
        headers = {"X-Vault-Token": self.cfg.vault_token or ""}
        body = None
        if increment is not None:
            body = json.dumps({"increment": increment.encode()}).encode("utf-8")
            headers["Content-Type"] = "application/json"

        retries = 0
        while True:
            try:
                raw = self.transport.dispatch("PUT", url, dict(headers), body,
                                              self.cfg.timeouts, self.cfg.tls)
                return decode_renewal(raw, lease_id, retries)
            except Exception as e:
                if retries < policy.max_retries and self.is_retryable(e):
                    retries += 1
                    jlog("warning", "renew_retry", lease_id=lease_id, attempt=retries,
                         max_retries=policy.max_retries, error=str(e))
                    self.sleep(policy.interval_ms / 1000.0)
                    continue
                jlog("error", "renew_gave_up", lease_id=lease_id, attempts=retries + 1, error=str(e))
                raise RetriesExhausted(retries + 1, e) from e
