"""
HTTP traffic logger for debugging and auditing.

Appends one line per outgoing request and incoming response, tagged with
the request id the manager assigns to each call.
"""

import json
from datetime import UTC
from datetime import datetime
from pathlib import Path
from typing import Any
from typing import Protocol

SENSITIVE_HEADERS = {"authorization", "x-api-key", "api-key"}


class HTTPLogger(Protocol):
    """Protocol for HTTP logging callbacks."""

    def log_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None,
        request_id: str | None = None,
    ) -> None:
        """Log an outgoing HTTP request."""
        ...

    def log_response(
        self,
        url: str,
        status: int | None,
        body: bytes,
        request_id: str | None = None,
    ) -> None:
        """Log an incoming HTTP response."""
        ...


def _parse_body(body: bytes | None) -> Any:
    if body is None:
        return None
    text = body.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


class FileHTTPLogger:
    """
    Logs HTTP traffic to a file.

    Format:
        [timestamp] [request_id] [direction] [type] payload

    Where direction is >>> for outgoing and <<< for incoming, and payload
    is JSON. Authorization-style header values are masked.
    """

    def __init__(self, log_file: Path):
        self.log_file = log_file
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.log_file.touch(exist_ok=True)

    def _write_log(self, request_id: str | None, marker: str, payload: dict[str, Any]) -> None:
        timestamp = datetime.now(UTC).isoformat(timespec="milliseconds")
        rid = request_id or "no-request"
        entry = f"[{timestamp}] [{rid}] {marker} {json.dumps(payload, ensure_ascii=False)}"
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(entry + "\n")

    def _sanitize_headers(self, headers: dict[str, str]) -> dict[str, str]:
        sanitized = {}
        for key, value in headers.items():
            if key.lower() not in SENSITIVE_HEADERS:
                sanitized[key] = value
            elif len(value) > 14:
                sanitized[key] = value[:10] + "..." + value[-4:]
            else:
                sanitized[key] = "***"
        return sanitized

    def log_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None,
        request_id: str | None = None,
    ) -> None:
        payload = {
            "method": method,
            "url": url,
            "headers": self._sanitize_headers(headers),
            "body": _parse_body(body),
        }
        self._write_log(request_id, ">>> REQUEST", payload)

    def log_response(
        self,
        url: str,
        status: int | None,
        body: bytes,
        request_id: str | None = None,
    ) -> None:
        payload = {
            "url": url,
            "status": status,
            "body": _parse_body(body),
        }
        self._write_log(request_id, "<<< RESPONSE", payload)
