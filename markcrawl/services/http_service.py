import requests
from typing import Callable, Mapping, Optional

from markcrawl.domain.http_response import HttpResponse
from markcrawl.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection (DIP compliance).
    This enables easy testing without patching and allows swapping HTTP libraries.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 30):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def build_headers(self, extra_headers: Optional[Mapping[str, str]] = None) -> dict:
        """Default User-Agent overlaid with caller-supplied headers."""
        headers = {"User-Agent": self.user_agent}
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None, timeout: Optional[int] = None) -> HttpResponse:
        """Fetch URL and return response with status code, body text, Content-Type and final URL."""
        try:
            resp = self.http_client(
                url,
                headers=self.build_headers(headers),
                timeout=timeout if timeout is not None else self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Extract Content-Type if response has headers; let real exceptions bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        final_url = getattr(resp, 'url', None)
        if not isinstance(final_url, str):
            final_url = url
        return HttpResponse(resp.status_code, resp.text, ct, final_url)
