import dataclasses, time, signal
from .config import Config
from .errors import RetriesExhausted
from .jsonlog import jlog
from .metrics import Metrics
from .timeutil import Increment, TimeUnit
from .vault import VaultClient

def _read_token(path: str) -> str | None:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip() or None
    except FileNotFoundError:
        return None

def resolve_token(cfg: Config) -> Config:
    """Return cfg with vault_token filled from token_file when not set."""
    if cfg.vault_token:
        return cfg
    t = _read_token(cfg.token_file)
    if not t:
        raise RuntimeError(f"no VAULT_TOKEN and empty token file: {cfg.token_file}")
    return dataclasses.replace(cfg, vault_token=t)

class Maintainer:
    def __init__(self, cfg: Config, m: Metrics, client: VaultClient | None = None):
        self.cfg, self.m = cfg, m
        self.vault = client or VaultClient(cfg)
        self.increment = (Increment(cfg.renew_increment_sec, TimeUnit.SECONDS)
                          if cfg.renew_increment_sec > 0 else None)

    def renew_one(self, lease_id: str) -> bool:
        self.m.RENEW_ATTEMPTS.labels(lease_id).inc()
        try:
            res = self.vault.renew_lease(lease_id, self.increment)
        except RetriesExhausted as e:
            self.m.RENEW_FAIL.labels(lease_id).inc()
            self.m.RETRIES.inc(e.attempts - 1)
            self.m.LAST_ERROR.set(time.time())
            jlog("error", "renew_failed", lease_id=lease_id, attempts=e.attempts, error=str(e.last_error))
            return False
        self.m.RENEW_SUCCESS.labels(lease_id).inc()
        self.m.RETRIES.inc(res.retries)
        self.m.DURATION.labels(lease_id).set(res.lease_duration)
        self.m.LAST_SUCCESS.labels(lease_id).set(time.time())
        jlog("info", "renew_ok", lease_id=res.lease_id, lease_duration=res.lease_duration,
             renewable=res.renewable, retries=res.retries)
        return True

    def check_and_renew(self):
        self.m.LAST_CHECK.set(time.time())
        leases = self.cfg.leases
        if not leases:
            self.m.status_idle()
            jlog("warning", "no_leases_configured")
            return
        ok = [self.renew_one(lease_id) for lease_id in leases]
        if all(ok):
            self.m.status_ok()
        else:
            self.m.status_error()

    def run_loop(self):
        running = True
        def stop(_s, _f):
            nonlocal running
            running = False
        signal.signal(signal.SIGINT, stop)
        signal.signal(signal.SIGTERM, stop)

        jlog("info", "loop_started", interval=self.cfg.check_interval_sec, leases=len(self.cfg.leases))
        while running:
            start = time.time()
            try:
                self.check_and_renew()
            except Exception as e:
                self.m.LAST_ERROR.set(time.time())
                self.m.status_error()
                jlog("error", "loop_unhandled", error=str(e))
            deadline = start + max(1, self.cfg.check_interval_sec)
            while running and time.time() < deadline:
                time.sleep(max(0.0, min(1.0, deadline - time.time())))
        self.m.shutdown()
        jlog("info", "shutdown")
