import json
from dataclasses import dataclass, field
from .errors import UnexpectedStatus, UnexpectedContentType, MalformedBody

JSON_MIME = "application/json"

@dataclass(frozen=True)
class RawResponse:
    status_code: int
    content_type: str | None
    body: bytes = b""

@dataclass(frozen=True)
class RenewalResult:
    status_code: int
    retries: int
    lease_id: str
    data: dict[str, str] = field(default_factory=dict)
    lease_duration: int = 0
    renewable: bool = False

class _Number(str):
    """A JSON number kept as its literal text from the wire."""

def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")

def _to_json(value) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, _Number):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, dict):
        return "{" + ",".join(f"{json.dumps(k, ensure_ascii=False)}:{_to_json(v)}" for k, v in value.items()) + "}"
    return "[" + ",".join(_to_json(v) for v in value) + "]"

def _render(value) -> str:
    # strings go through as-is, everything else as compact JSON text
    if isinstance(value, str) and not isinstance(value, _Number):
        return value
    return _to_json(value)

def _as_int(value) -> int:
    if not isinstance(value, _Number):
        return 0
    try:
        return int(value)
    except ValueError:
        return 0

def _parse_envelope(body: bytes) -> dict:
    try:
        doc = json.loads(body.decode("utf-8"), parse_int=_Number, parse_float=_Number,
                         parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        raise MalformedBody(f"response body is not UTF-8: {e}") from e
    except ValueError as e:
        raise MalformedBody(f"response body is not JSON: {e}") from e
    if not isinstance(doc, dict):
        raise MalformedBody(f"expected a JSON object, got {type(doc).__name__}")
    return doc

def extract_data(envelope: dict) -> dict[str, str]:
    data = envelope.get("data")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedBody(f"'data' must be an object or null, got {type(data).__name__}")
    return {k: _render(v) for k, v in data.items() if v is not None}

def decode_renewal(raw: RawResponse, lease_id: str, retries: int = 0) -> RenewalResult:
    """Validate a renew response and flatten its ``data`` member.

    Raises UnexpectedStatus, UnexpectedContentType or MalformedBody when the
    response does not look like a successful Vault reply.
    """
    if raw.status_code != 200:
        raise UnexpectedStatus(raw.status_code)
    mime = "null" if raw.content_type is None else raw.content_type
    if mime != JSON_MIME:
        raise UnexpectedContentType(mime)

    envelope = _parse_envelope(raw.body)
    data = extract_data(envelope)

    returned_id = envelope.get("lease_id")
    duration = envelope.get("lease_duration")
    return RenewalResult(
        status_code=raw.status_code,
        retries=retries,
        lease_id=returned_id if isinstance(returned_id, str) and returned_id else lease_id,
        data=data,
        lease_duration=_as_int(duration),
        renewable=envelope.get("renewable") is True,
    )
