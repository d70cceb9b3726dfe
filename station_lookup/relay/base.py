from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True)
class RelayResponse:
    """Upstream response passed through to the client unchanged."""

    status_code: int
    content_type: str
    body: bytes
