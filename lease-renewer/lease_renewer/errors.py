class VaultError(Exception):
    """Base for everything the renew pipeline raises."""


class UnsupportedUnit(VaultError, ValueError):
    def __init__(self, unit):
        super().__init__(f"invalid time unit: {unit}")
        self.unit = unit


class TransportError(VaultError):
    pass


class UnexpectedStatus(VaultError):
    def __init__(self, status_code: int):
        super().__init__(f"Vault responded with HTTP status code: {status_code}")
        self.status_code = status_code


class UnexpectedContentType(VaultError):
    def __init__(self, content_type: str):
        super().__init__(f"Vault responded with MIME type: {content_type}")
        self.content_type = content_type


class MalformedBody(VaultError):
    pass


class RetriesExhausted(VaultError):
    """Terminal failure of a retried call.

    `attempts` is the total number of requests made (initial one included),
    `last_error` the failure of the final attempt.
    """
    def __init__(self, attempts: int, last_error: Exception):
        super().__init__(f"giving up after {attempts} attempt(s): {last_error}")
        self.attempts, self.last_error = attempts, last_error
