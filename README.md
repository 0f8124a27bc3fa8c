# lfx_auth

Small building blocks for an authentication service. The package uses only the standard library.

- `lfx_auth.constants` holds the service name, the environment variable keys, the message subjects and queue name, and the lookup criteria types (`CRITERIA_TYPE_EMAIL`, `CRITERIA_TYPE_USERNAME`).
- `lfx_auth.errors` defines an exception hierarchy rooted at `ServiceError`. The subclasses are `ValidationError`, `NotFoundError`, `ConflictError`, `UnexpectedError` and `ServiceUnavailableError`.
- `lfx_auth.redaction` provides `redact` and `redact_email`, which mask sensitive values before they are logged.
- `lfx_auth.logsetup` sets up JSON logging and attaches fields from the current context to every record.
- `lfx_auth.http_config` and `lfx_auth.http_client` provide an HTTP client that retries failed requests, built on `urllib`.
- `lfx_auth.api_request` makes authenticated JSON API calls through that client.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install ".[test]"
```

## Redaction

`redact` returns `""` for an empty string and `"**"` for one or two characters. For three to five characters it keeps the first character and appends `"****"`. For longer strings it keeps the first three characters and appends `"****"`. `redact_email` redacts only the local part and leaves the domain as it is. If the input does not contain exactly one `@`, it redacts the whole string.

```python
from lfx_auth.redaction import redact, redact_email

redact("johndoe123")               # "joh****"
redact_email("john@example.com")   # "j****@example.com"
redact_email("notanemail")         # "not****"
```

## Errors

Each error takes a message, optionally followed by the errors that caused it. `None` causes are dropped. When causes are present, `str()` gives `"message: cause"`, and multiple causes are joined with newlines. The first cause becomes `__cause__`.

```python
from lfx_auth.errors import NotFoundError

try:
    raise NotFoundError("user not found", KeyError("alice"))
except NotFoundError as exc:
    print(exc)          # user not found: 'alice'
    print(exc.message)  # user not found
    print(exc.errors)   # (KeyError('alice'),)
```

## Logging

`init_structure_log_config(stream)` clears the root logger's handlers. It then installs a single handler that writes one JSON object per line to `stream`, or to standard output if `stream` is omitted, and returns that handler.

The level comes from `LOG_LEVEL`, which accepts `debug`, `info` or `warn`. Any other value, or no value, gives `debug`. If `LOG_ADD_SOURCE=true` is set, each record also carries a `source` object with the function, file and line.

Each record contains:
- `time`, `level` and `msg`;
- any `extra` fields passed to the logging call;
- the fields added with `append_context(key, value)`.

`context_fields()` returns the fields held in the current context. `priority(level)` and `priority_critical()` return dictionaries to pass as `extra`.

```python
import logging
import sys

from lfx_auth.logsetup import append_context, init_structure_log_config, priority_critical

init_structure_log_config(sys.stdout)
append_context("request_id", "abc-123")
logging.getLogger(__name__).error("lookup failed", extra=priority_critical())
# {"time": "...", "level": "ERROR", "msg": "lookup failed", "priority": "critical", "request_id": "abc-123"}
```

## HTTP client

`Config` is a frozen dataclass whose durations are in seconds. `default_config()` returns:

| Field | Default |
|---|---|
| `timeout` | 30.0 |
| `max_retries` | 2 |
| `retry_delay` | 1.0 |
| `retry_backoff` | True |

With backoff enabled, the delay doubles after each attempt.

```python
from lfx_auth.http_client import Client
from lfx_auth.http_config import default_config

client = Client(default_config())
response = client.request("GET", "https://api.example.com/items", None, {"X-Trace": "1"})
print(response.status_code, response.body)
```

`Client.request(verb, url, body, headers)` accepts a body as bytes, a string, a readable file object, or `None`. It sends `Accept: application/json` unless the headers override it. For a response with status 400 or higher it raises `RetryableError`, which has:
- `status_code`;
- a message holding the response body;
- the `Response` in `.response`.

The client retries these cases:
- 5xx responses;
- 429 responses;
- connection errors and timeouts;
- errors whose text mentions "timeout", "connection" or "network".

Other 4xx responses are not retried. Once the retries are used up, the last error is raised. `Client.do(request)` accepts a ready-made `Request` instead of separate arguments.

## API calls

```python
from lfx_auth.api_request import APIRequest
from lfx_auth.http_client import Client

api = APIRequest(
    Client(),
    method="GET",
    url="https://api.example.com/users/me",
    token="token",
    description="fetch user",
)
status, data = api.call(True)
```

`APIRequest.call(parse_body)` returns `(status_code, data)`. `data` holds the decoded JSON, or `None` if `parse_body` is false or the response body is empty.

Request handling:
- A token without a `Bearer ` prefix is sent as `Authorization: Bearer token`.
- A non-`None` `body` is JSON-encoded and sent with `Content-Type: application/json`.

Errors:
- A missing token, URL or method raises `ValidationError`.
- A body that cannot be encoded raises `UnexpectedError`.
- A response body that is not valid JSON raises `UnexpectedError`.
- A failure from the client, including error statuses that the client raises as `RetryableError`, is wrapped in `UnexpectedError("failed to <description>", ...)`.
- Any other status outside 2xx raises `APIStatusError`, which has `status_code` and `body`.

## What this package does not do

There is no server, no message subscriber and no user store. The subject names and environment keys in `lfx_auth.constants` are only definitions, and nothing in the package reads or acts on them.

## Running the tests

```
pytest
```