"""A small HTTP client that retries on server errors and network failures."""

from __future__ import annotations

import logging
import time
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from email.message import Message
from typing import IO, Union

from lfx_auth.http_config import Config

_log = logging.getLogger(__name__)

Body = Union[bytes, str, IO[bytes], IO[str], None]

_RETRY_HINTS = ("timeout", "connection", "network")


@dataclass
class Request:
    """An HTTP request to send."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass
class Response:
    """An HTTP response as received."""

    status_code: int
    headers: Message
    body: bytes


class RetryableError(Exception):
    """An HTTP response with an error status; the message is the response body."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.response: Response | None = None

    def __str__(self) -> str:
        return self.message


def _should_retry(err: Exception) -> bool:
    if isinstance(err, RetryableError):
        return err.status_code >= 500 or err.status_code == 429
    if isinstance(err, (ConnectionError, TimeoutError)):
        return True
    text = str(err).lower()
    return any(hint in text for hint in _RETRY_HINTS)


def _as_bytes(body: Body) -> bytes | None:
    if body is None:
        return None
    if hasattr(body, "read"):
        body = body.read()
    if isinstance(body, str):
        return body.encode("utf-8")
    return bytes(body)


class Client:
    """Sends HTTP requests, retrying those that fail in a retryable way."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()

    def do(self, request: Request) -> Response:
        """Send a request, retrying per the config; raise the last error on failure."""
        last_error: Exception | None = None
        for attempt in range(self.config.max_retries + 1):
            if attempt > 0:
                delay = self.config.retry_delay
                if self.config.retry_backoff:
                    delay *= 2 ** (attempt - 1)
                time.sleep(delay)
            try:
                return self._send(request)
            except Exception as exc:  # noqa: BLE001 - decided by _should_retry
                last_error = exc
                if not _should_retry(exc):
                    break
        _log.error("request failed", extra={"error": str(last_error)})
        assert last_error is not None
        raise last_error

    def request(
        self,
        verb: str,
        url: str,
        body: Body = None,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send a request with the given verb, URL, body and headers."""
        return self.do(
            Request(method=verb, url=url, headers=dict(headers or {}), body=_as_bytes(body))
        )

    def _send(self, request: Request) -> Response:
        headers = {"Accept": "application/json", **request.headers}
        try:
            http_request = urllib.request.Request(
                request.url, data=request.body, headers=headers, method=request.method
            )
        except ValueError as exc:
            raise ValueError(f"failed to create request: {exc}") from exc

        try:
            with urllib.request.urlopen(http_request, timeout=self.config.timeout) as resp:
                status, resp_headers, body = resp.status, resp.headers, resp.read()
        except urllib.error.HTTPError as exc:
            status, resp_headers = exc.code, exc.headers
            try:
                body = exc.read()
            finally:
                exc.close()
        except (urllib.error.URLError, OSError) as exc:
            reason = getattr(exc, "reason", exc)
            if isinstance(exc, TimeoutError) or isinstance(reason, TimeoutError):
                raise TimeoutError(f"HTTP request failed: timeout: {reason}") from exc
            raise ConnectionError(f"HTTP request failed: {reason}") from exc

        response = Response(status_code=status, headers=resp_headers, body=body)
        if status >= 400:
            error = RetryableError(status, body.decode("utf-8", errors="replace"))
            error.response = response
            raise error
        return response