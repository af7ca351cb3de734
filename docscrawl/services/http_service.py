from typing import Callable

import requests

from docscrawl.domain.http_response import HttpResponse
from docscrawl.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching documentation pages.

    Requires http_client callable for dependency injection, so tests can
    swap in a mock without patching and the HTTP library stays replaceable.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 30):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    @property
    def headers(self) -> dict:
        return {"Accept": "text/html", "User-Agent": self.user_agent}

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return its status code and body text."""
        try:
            resp = self.http_client(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        return HttpResponse(resp.status_code, resp.text)
