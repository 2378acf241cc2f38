from prometheus_client import start_http_server, Gauge, Counter, CollectorRegistry

class Metrics:
    """
    Metrics for lease renewal, served on a single /metrics:
    - lease_renewer_up (Gauge 0/1)
    - lease_renewer_status{state="ok|error|idle"} (Gauge)
    - lease_renew_attempts_total / success_total / fail_total{lease} (Counters)
    - lease_renew_retries_total (Counter), retries consumed by successful and failed calls
    - lease_duration_seconds{lease}, lease_last_success_time_seconds{lease} (Gauges)
    - lease_renewer_last_check_time_seconds, lease_renewer_last_error_time_seconds (Gauges)
    """
    STATES = ("ok", "error", "idle")

    def __init__(self, port: int = 0):
        # own registry, no process_/python_ collectors
        self.registry = CollectorRegistry()

        self.SERVICE_UP = Gauge("lease_renewer_up", "Service running (1=up, 0=down)", registry=self.registry)
        self.STATUS     = Gauge("lease_renewer_status", "High-level service status", ["state"], registry=self.registry)

        self.DURATION     = Gauge("lease_duration_seconds", "Lease duration granted by the last renewal", ["lease"], registry=self.registry)
        self.LAST_SUCCESS = Gauge("lease_last_success_time_seconds", "Last successful renewal (unix seconds)", ["lease"], registry=self.registry)
        self.LAST_CHECK   = Gauge("lease_renewer_last_check_time_seconds", "Last check time (unix seconds)", registry=self.registry)
        self.LAST_ERROR   = Gauge("lease_renewer_last_error_time_seconds", "Last error time (unix seconds)", registry=self.registry)

        self.RENEW_ATTEMPTS = Counter("lease_renew_attempts_total", "Renew calls", ["lease"], registry=self.registry)
        self.RENEW_SUCCESS  = Counter("lease_renew_success_total",  "Renew successes", ["lease"], registry=self.registry)
        self.RENEW_FAIL     = Counter("lease_renew_fail_total",     "Renew failures", ["lease"], registry=self.registry)
        self.RETRIES        = Counter("lease_renew_retries_total",  "Retries consumed", registry=self.registry)

        # port 0: no HTTP endpoint, registry only
        if port:
            start_http_server(port, registry=self.registry)

        self.SERVICE_UP.set(1)
        self._set_status("idle")

    def _set_status(self, state: str):
        for s in self.STATES:
            self.STATUS.labels(state=s).set(1 if s == state else 0)

    def status_ok(self):    self._set_status("ok")
    def status_error(self): self._set_status("error")
    def status_idle(self):  self._set_status("idle")

    def shutdown(self):
        self.SERVICE_UP.set(0)
