from dataclasses import dataclass
import os
from .transport import Timeouts, TlsMaterial

def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() not in ("0", "false", "no", "off", "")

@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 0
    interval_ms: int = 1000

    def __post_init__(self):
        if self.max_retries < 0 or self.interval_ms < 0:
            raise ValueError(f"retry policy must be non-negative: {self}")

@dataclass(frozen=True)
class Config:
    vault_addr: str = os.getenv("VAULT_ADDR", "http://127.0.0.1:8200")
    vault_token: str | None = os.getenv("VAULT_TOKEN")
    token_file: str = os.getenv("VAULT_TOKEN_FILE", "/etc/vault/token")

    open_timeout: float = float(os.getenv("VAULT_OPEN_TIMEOUT", "5.0"))
    read_timeout: float = float(os.getenv("VAULT_READ_TIMEOUT", "30.0"))
    ssl_verify: bool = _env_bool("VAULT_SSL_VERIFY", True)
    ssl_pem_file: str | None = os.getenv("VAULT_SSL_PEM_FILE")

    max_retries: int = int(os.getenv("VAULT_MAX_RETRIES", "0"))
    retry_interval_ms: int = int(os.getenv("VAULT_RETRY_INTERVAL_MS", "1000"))

    lease_ids: str | None = os.getenv("LEASE_IDS")    # "a/b/1" или "a/b/1,c/d/2"
    renew_increment_sec: int = int(os.getenv("RENEW_INCREMENT_SEC", "0"))
    check_interval_sec: int = int(os.getenv("CHECK_INTERVAL_SEC", "300"))
    metrics_port: int = int(os.getenv("METRICS_PORT", "9755"))
    log_level: str = os.getenv("LOG_LEVEL", "info")

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(self.max_retries, self.retry_interval_ms)

    @property
    def timeouts(self) -> Timeouts:
        return Timeouts(self.open_timeout, self.read_timeout)

    @property
    def tls(self) -> TlsMaterial:
        return TlsMaterial(self.ssl_verify, self.ssl_pem_file)

    @property
    def leases(self) -> list[str]:
        return [x.strip() for x in (self.lease_ids or "").split(",") if x.strip()]
