from .errors import (
    VaultError, UnsupportedUnit, TransportError, UnexpectedStatus,
    UnexpectedContentType, MalformedBody, RetriesExhausted,
)
from .timeutil import TimeUnit, Increment, time_string
from .response import RawResponse, RenewalResult, decode_renewal
from .vault import VaultClient, retry_all, retry_transient

__all__ = [
    "VaultError", "UnsupportedUnit", "TransportError", "UnexpectedStatus",
    "UnexpectedContentType", "MalformedBody", "RetriesExhausted",
    "TimeUnit", "Increment", "time_string",
    "RawResponse", "RenewalResult", "decode_renewal",
    "VaultClient", "retry_all", "retry_transient",
]
