from dataclasses import dataclass
import requests
from .errors import TransportError
from .response import RawResponse

@dataclass(frozen=True)
class Timeouts:
    connect: float = 5.0
    read: float = 30.0

@dataclass(frozen=True)
class TlsMaterial:
    verify: bool = True
    ca_pem_file: str | None = None

    @property
    def requests_verify(self) -> bool | str:
        # a CA bundle path implies verification
        if self.ca_pem_file:
            return self.ca_pem_file
        return self.verify

def _mime_type(header: str | None) -> str | None:
    if header is None:
        return None
    return header.split(";", 1)[0].strip()

class HttpTransport:
    def __init__(self, session: requests.Session | None = None):
        self.session = session

    def dispatch(self, method: str, url: str, headers: dict, body: bytes | None,
                 timeouts: Timeouts, tls: TlsMaterial) -> RawResponse:
        send = self.session.request if self.session is not None else requests.request
        try:
            r = send(method, url, headers=headers, data=body,
                     timeout=(timeouts.connect, timeouts.read),
                     verify=tls.requests_verify)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        return RawResponse(r.status_code, _mime_type(r.headers.get("Content-Type")), r.content)
