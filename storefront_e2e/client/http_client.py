"""
HTTP client for the storefront under test.

Wraps a requests.Session bound to one base URL. Requests are sent once:
no retries, and network errors propagate to the caller so the scenario
fails with the underlying detail. Responses carry a small fluent
assertion surface (status code and JSON body checks).
"""

import time
from typing import Any, Callable, Dict, Optional
from urllib.parse import urljoin, urlparse

import requests
from pydantic import BaseModel

from storefront_e2e.utils.logger import get_logger

logger = get_logger("http")

# How much of a response body to echo in assertion messages
_BODY_EXCERPT_CHARS = 300

_MISSING = object()


def not_none(value: Any) -> bool:
    return value is not None


def not_empty(value: Any) -> bool:
    """True for a non-empty string/collection; None and empty values fail."""
    if value is None:
        return False
    try:
        return len(value) > 0
    except TypeError:
        return True


def one_of(*allowed: Any) -> Callable[[Any], bool]:
    def _matcher(value: Any) -> bool:
        return value in allowed
    _matcher.__name__ = f"one_of{allowed}"
    return _matcher


def resolve_json_path(data: Any, path: str) -> Any:
    """
    Walk a dotted path through parsed JSON.

    Examples:
        resolve_json_path({"id": 5}, "id") -> 5
        resolve_json_path({"items": [{"sku": "a"}]}, "items.0.sku") -> "a"

    Returns None when any segment is missing.
    """
    current = data
    for segment in path.split("."):
        if isinstance(current, dict):
            current = current.get(segment, _MISSING)
        elif isinstance(current, list) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else _MISSING
        else:
            current = _MISSING
        if current is _MISSING:
            return None
    return current


class ApiResponse:
    """A completed HTTP exchange plus assertion helpers."""

    def __init__(self, response: requests.Response, method: str, elapsed_ms: float):
        self.raw = response
        self.method = method
        self.elapsed_ms = elapsed_ms

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def text(self) -> str:
        return self.raw.text

    @property
    def url(self) -> str:
        return self.raw.url

    @property
    def headers(self):
        return self.raw.headers

    def _describe(self) -> str:
        excerpt = self.text[:_BODY_EXCERPT_CHARS]
        return f"{self.method} {self.url} -> {self.status_code}; body: {excerpt!r}"

    def json(self) -> Any:
        try:
            return self.raw.json()
        except ValueError:
            raise AssertionError(f"Response body is not JSON: {self._describe()}")

    def assert_status(self, *expected: int) -> "ApiResponse":
        """Fail unless the status code is one of ``expected``."""
        if self.status_code not in expected:
            wanted = expected[0] if len(expected) == 1 else set(expected)
            raise AssertionError(f"Expected status {wanted}, got {self.status_code}: {self._describe()}")
        return self

    def assert_body(
        self,
        json_path: str,
        matcher: Callable[[Any], bool],
        description: Optional[str] = None,
    ) -> "ApiResponse":
        """Fail unless ``matcher`` accepts the value at ``json_path``."""
        value = resolve_json_path(self.json(), json_path)
        if not matcher(value):
            label = description or getattr(matcher, "__name__", "matcher")
            raise AssertionError(
                f"Body path '{json_path}' = {value!r} does not satisfy {label}: {self._describe()}"
            )
        return self


class StorefrontClient:
    """Issues requests against a fixed storefront base URL."""

    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        """Absolute URL for ``path``; absolute and scheme-relative URLs keep their host."""
        parsed = urlparse(path)
        if parsed.scheme:
            return path
        if parsed.netloc:
            return urljoin(self.base_url + "/", path)
        return urljoin(self.base_url + "/", path.lstrip("/"))

    @staticmethod
    def bearer(token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> ApiResponse:
        method = method.upper()
        url = self.url_for(path)
        start = time.perf_counter()
        response = self.session.request(
            method,
            url,
            json=json,
            params=params,
            headers=headers,
            timeout=self.timeout,
        )
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug("%s %s -> %s (%.1f ms)", method, url, response.status_code, elapsed_ms)
        return ApiResponse(response, method, elapsed_ms)

    def get(self, path: str, **kwargs) -> ApiResponse:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> ApiResponse:
        return self.request("POST", path, **kwargs)

    def post_model(self, path: str, body: BaseModel, **kwargs) -> ApiResponse:
        """POST a pydantic model as a JSON body."""
        return self.post(path, json=body.model_dump(mode="json"), **kwargs)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "StorefrontClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

