"""Building blocks for an authentication service: constants, errors, redaction, JSON logging and a retrying HTTP client."""

__version__ = "0.1.0"
__all__ = [
    "api_request",
    "constants",
    "errors",
    "http_client",
    "http_config",
    "logsetup",
    "redaction",
]