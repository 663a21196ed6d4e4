"""
HTTP client for the Ruby release index.

The index is fetched with a single GET over https. There is no caching and no
retrying: any failure surfaces as a FetchError and ends the run.
"""

import importlib.metadata
from typing import Optional
from urllib.parse import urlsplit

import requests

from ruby_version_checker.constants import (
    APP_NAME,
    DEFAULT_REQUEST_TIMEOUT,
    SECURE_URL_SCHEME,
)
from ruby_version_checker.exceptions import FetchError
from ruby_version_checker.log_utils import logger

# Cache for the User-Agent string to avoid repeated metadata lookups
_USER_AGENT_CACHE: Optional[str] = None


def get_user_agent() -> str:
    """
    Get the User-Agent string used for HTTP requests.

    Returns:
        The string `ruby-version-checker/{version}`, where `{version}` is the
        installed package version or `unknown` if it cannot be determined.
    """
    global _USER_AGENT_CACHE

    if _USER_AGENT_CACHE is None:
        try:
            app_version = importlib.metadata.version(APP_NAME)
        except importlib.metadata.PackageNotFoundError:
            app_version = "unknown"

        _USER_AGENT_CACHE = f"{APP_NAME}/{app_version}"

    return _USER_AGENT_CACHE


class ReleaseIndexClient:
    """
    Fetches the release index as text.

    Usage:
        with ReleaseIndexClient(timeout=30) as client:
            text = client.fetch("https://cache.ruby-lang.org/pub/ruby/index.txt")
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        """
        Initialize the client.

        Parameters:
            session (Optional[requests.Session]): Session to send requests with.
                A new session is created (and owned) when omitted.
            timeout (float): Request timeout in seconds.
        """
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": get_user_agent()})
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        """
        Download the body of `url` as text.

        Raises:
            FetchError: If the URL is not https, the request fails, or the
                server answers with a non-success status.
        """
        scheme = urlsplit(url).scheme
        if scheme != SECURE_URL_SCHEME:
            raise FetchError(
                "Refusing to fetch release index over an insecure connection",
                url=url,
                details=f"scheme '{scheme or 'none'}' is not {SECURE_URL_SCHEME}",
            )

        logger.debug(f"Fetching release index: {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = (
                exc.response.status_code if exc.response is not None else None
            )
            raise FetchError(
                "Release index request returned an error status",
                url=url,
                status_code=status_code,
                details=str(exc),
            ) from exc
        except requests.RequestException as exc:
            raise FetchError(
                "Unable to fetch release index", url=url, details=str(exc)
            ) from exc

        response.encoding = "utf-8"
        text = response.text
        logger.debug(f"Fetched {len(text)} characters from {url}")
        return text

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ReleaseIndexClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def fetch_data(url: str, client: Optional[ReleaseIndexClient] = None) -> str:
    """
    Fetch the release index at `url`, using `client` when one is given.

    Raises:
        FetchError: On any transport failure.
    """
    if client is not None:
        return client.fetch(url)
    with ReleaseIndexClient() as owned_client:
        return owned_client.fetch(url)
