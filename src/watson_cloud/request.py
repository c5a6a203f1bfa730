"""Generic request construction and response normalization."""
import base64
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import quote

import httpx

from . import __version__
from .config import ServiceConfig
from .helper import build_file_part, to_query_value

logger = logging.getLogger(__name__)

USER_AGENT = f"watson-cloud-python/{__version__}"
UNAUTHORIZED_MESSAGE = "Unauthorized: Access is denied due to invalid credentials."
_ERROR_KEYS = ("error", "error_message", "errorMessage", "message", "description")


class WatsonApiError(Exception):
    """Raised when a service returns an error response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
        transaction_id: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details or {}
        self.transaction_id = transaction_id


@dataclass
class RequestOptions:
    """Everything that varies between two calls to a service."""

    method: str
    url: str
    path: Dict[str, Any] = field(default_factory=dict)
    query: Dict[str, Any] = field(default_factory=dict)
    json: Any = None
    content: Optional[Union[str, bytes]] = None
    # form field -> (upload value, default content type)
    files: Dict[str, Tuple[Any, str]] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


def format_url(base_url: str, template: str, path: Dict[str, Any]) -> str:
    url = template
    for name, value in path.items():
        url = url.replace("{%s}" % name, quote(str(value), safe=""))
    return base_url.rstrip("/") + url


def auth_headers(config: ServiceConfig) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if config.use_unauthenticated:
        return headers
    if config.authorization_token:
        headers["Authorization"] = f"Bearer {config.authorization_token}"
    elif config.username and config.password:
        raw = f"{config.username}:{config.password}".encode("utf-8")
        headers["Authorization"] = "Basic " + base64.b64encode(raw).decode("ascii")
    return headers


def build_request(
    client: Union[httpx.Client, httpx.AsyncClient],
    base_url: str,
    options: RequestOptions,
    config: ServiceConfig,
) -> httpx.Request:
    """Assemble an httpx request from per-call options and service-wide config."""
    url = format_url(base_url, options.url, options.path)
    params = {
        key: to_query_value(value) for key, value in options.query.items() if value is not None
    }

    # case-insensitive, later layers replace earlier ones
    headers = httpx.Headers({"User-Agent": USER_AGENT})
    headers.update(config.headers)
    if config.learning_opt_out:
        headers["X-Watson-Learning-Opt-Out"] = "true"
    headers.update(options.headers)
    headers.update(auth_headers(config))

    files = None
    if options.files:
        files = {
            name: build_file_part(value, content_type, name)
            for name, (value, content_type) in options.files.items()
            if value is not None
        }
        # httpx generates the header together with the boundary
        headers.pop("Content-Type", None)

    content = options.content
    if isinstance(content, str):
        content = content.encode("utf-8")

    logger.debug("%s %s params=%s", options.method, url, params)
    return client.build_request(
        options.method,
        url,
        params=params or None,
        headers=headers,
        json=options.json,
        content=content,
        files=files or None,
    )


def _error_message(payload: Any, default: str) -> str:
    if isinstance(payload, dict):
        for key in _ERROR_KEYS:
            value = payload.get(key)
            if isinstance(value, dict):
                value = value.get("message")
            if value:
                return str(value)
    return default


def raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    message = response.reason_phrase
    details: Dict = {}
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        details = payload
    message = _error_message(payload, message)
    if response.status_code == 401:
        message = UNAUTHORIZED_MESSAGE
    transaction_id = response.headers.get("X-Global-Transaction-Id")
    logger.warning(
        "Request to %s failed with %s: %s", response.request.url, response.status_code, message
    )
    raise WatsonApiError(
        message=message,
        status_code=response.status_code,
        details=details,
        transaction_id=transaction_id,
    )


def parse_response(response: httpx.Response) -> Any:
    """Return the decoded body of a successful response, raising otherwise."""
    raise_for_status(response)
    if not response.content:
        return None
    if "json" in response.headers.get("Content-Type", ""):
        try:
            return response.json()
        except ValueError:
            logger.debug("Response from %s is not valid JSON", response.request.url)
    return response.text
