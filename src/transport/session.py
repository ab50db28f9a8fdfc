"""HTTP session management using httpx.

Hard rules:
  - Single client per run, closed by ``async with``
  - Cookie auth only (no login flow), cookies are optional
  - No retries here: one request per call, failures are raised
"""

import json
import logging
from pathlib import Path
from types import TracebackType

import httpx

from src.core.config import HttpConfig

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """A LinkedIn request failed (transport error or non-success status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(FetchError):
    """LinkedIn answered 404 for the requested path."""


class HttpSession:
    """Async context manager that owns one httpx client.

    Usage::

        async with HttpSession(config) as session:
            html = await session.get_text("/jobs/view/123")
    """

    def __init__(
        self,
        config: HttpConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """The client for this session. Raises if not entered."""
        if self._client is None:
            msg = "HttpSession not entered, use 'async with'"
            raise RuntimeError(msg)
        return self._client

    async def __aenter__(self) -> "HttpSession":
        cookies = _load_cookies(self._config.cookies_path)
        if cookies:
            logger.info("Loaded %d cookies from %s", len(cookies), self._config.cookies_path)
        else:
            logger.debug("No cookies loaded, session will be unauthenticated")

        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=build_headers(self._config),
            cookies=cookies,
            timeout=self._config.timeout_ms / 1000,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_text(self, url: str) -> str:
        """GET a path or absolute URL and return the body text.

        Raises:
            NotFoundError: on HTTP 404.
            FetchError: on any other transport error or non-2xx status.
        """
        logger.debug("GET %s", url)
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            msg = f"Request to {url} failed: {e}"
            raise FetchError(msg) from e

        if response.status_code == 404:
            msg = f"Not found: {url}"
            raise NotFoundError(msg, status_code=404)
        if response.is_error:
            msg = f"Request to {url} failed with HTTP {response.status_code}"
            raise FetchError(msg, status_code=response.status_code)
        return response.text


def build_headers(config: HttpConfig) -> dict[str, str]:
    """Browser-like default headers for public LinkedIn pages."""
    return {
        "User-Agent": config.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": config.accept_language,
        "Upgrade-Insecure-Requests": "1",
    }


def _load_cookies(path: str | None) -> dict[str, str]:
    """Load cookies from a JSON array file. Returns empty dict on any failure.

    Accepts the browser export format (list of ``{"name", "value", ...}``).
    """
    if not path:
        return {}
    cookie_path = Path(path)
    if not cookie_path.exists():
        logger.debug("Cookie file not found: %s", path)
        return {}
    try:
        data = json.loads(cookie_path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to load cookies from %s: %s", path, e)
        return {}
    if not isinstance(data, list):
        logger.warning("Cookie file is not a JSON array: %s", path)
        return {}
    return {
        str(c["name"]): str(c["value"])
        for c in data
        if isinstance(c, dict) and "name" in c and "value" in c
    }
