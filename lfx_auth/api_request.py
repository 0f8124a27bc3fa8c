"""Authenticated JSON calls to an HTTP API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from lfx_auth.errors import UnexpectedError, ValidationError
from lfx_auth.http_client import Client

_log = logging.getLogger(__name__)


class APIStatusError(Exception):
    """The API answered with a status outside the 2xx range."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


@dataclass
class APIRequest:
    """A configured API call: method, URL, optional JSON body and bearer token."""

    http_client: Client
    method: str = ""
    url: str = ""
    body: Any = None
    token: str = ""
    description: str = ""

    def call(self, parse_body: bool = True) -> tuple[int, Any]:
        """Perform the call; return the status code and the decoded JSON body.

        The body is None when parse_body is false or the response is empty.
        """
        if not self.token:
            raise ValidationError(
                "no authentication token available (neither user token nor M2M token)"
            )
        if not self.url:
            raise ValidationError("URL is required")
        if not self.method.strip():
            raise ValidationError("HTTP method is required")

        request_body: bytes | None = None
        if self.body is not None:
            try:
                request_body = json.dumps(self.body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise UnexpectedError("failed to marshal request body", exc) from exc

        _log.debug(
            "calling API",
            extra={
                "method": self.method,
                "url": self.url,
                "request_body": (request_body or b"").decode("utf-8"),
            },
        )

        auth_header = self.token.strip()
        if not auth_header.lower().startswith("bearer "):
            auth_header = "Bearer " + auth_header
        headers = {"Authorization": auth_header, "Accept": "application/json"}
        if self.body is not None:
            headers["Content-Type"] = "application/json"

        try:
            response = self.http_client.request(self.method, self.url, request_body, headers)
        except Exception as exc:
            _log.error(
                "API request failed",
                extra={"error": str(exc), "method": self.method, "description": self.description},
            )
            raise UnexpectedError(f"failed to {self.description}", exc) from exc

        text = response.body.decode("utf-8", errors="replace")
        if not 200 <= response.status_code < 300:
            _log.error(
                "API returned error",
                extra={
                    "status_code": response.status_code,
                    "response_body": text,
                    "method": self.method,
                    "description": self.description,
                },
            )
            raise APIStatusError(response.status_code, text)

        if not parse_body or not response.body:
            _log.debug(
                "API call successful",
                extra={
                    "method": self.method,
                    "status_code": response.status_code,
                    "description": self.description,
                    "empty_body": not response.body,
                },
            )
            return response.status_code, None

        try:
            data = json.loads(response.body)
        except ValueError as exc:
            _log.error("failed to parse API response", extra={"error": str(exc)})
            raise UnexpectedError("failed to parse API response", exc) from exc

        _log.debug(
            "API call successful",
            extra={
                "method": self.method,
                "status_code": response.status_code,
                "description": self.description,
            },
        )
        return response.status_code, data