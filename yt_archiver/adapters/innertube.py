"""InnerTube HTTP adapter: watch page GET and continuation POSTs (httpx, async)."""

from typing import Any
from urllib.parse import urlencode

import httpx

from yt_archiver.adapters.base import ContinuationClient, RequestFailed
from yt_archiver.config import HttpConfig, InnerTubeConfig


class InnerTubeClient(ContinuationClient):
    """Async client for the platform's watch pages and internal "next" endpoint.

    One instance owns one httpx.AsyncClient; use it as an async context
    manager (or call aclose). No retries are made at this layer.
    """

    def __init__(
        self,
        http: HttpConfig | None = None,
        innertube: InnerTubeConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._http = http or HttpConfig()
        self._innertube = innertube or InnerTubeConfig()
        self._client = client or httpx.AsyncClient(timeout=self._http.timeout)

    async def __aenter__(self) -> "InnerTubeClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def next_url(self, api_key: str) -> str:
        """Continuation endpoint URL for the discovered API key."""
        base = self._http.base_url.rstrip("/") + "/" + self._http.api_path.lstrip("/")
        return f"{base}?{urlencode({'key': api_key})}"

    def client_context(self, client_version: str) -> dict[str, Any]:
        return {
            "client": {
                "clientName": self._innertube.client_name,
                "clientVersion": client_version,
                "hl": self._innertube.hl,
                "gl": self._innertube.gl,
            }
        }

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        headers = {"User-Agent": self._http.user_agent, **kwargs.pop("headers", {})}
        resp = await self._client.request(method, url, headers=headers, **kwargs)
        if not resp.is_success:
            raise RequestFailed(resp.status_code, url, f"{url} returned {resp.status_code}")
        return resp

    async def fetch_text(self, url: str) -> str:
        """GET ``url`` (redirects per config) and return the decoded body."""
        resp = await self._request("GET", url, follow_redirects=self._http.follow_redirects)
        return resp.text

    async def fetch_page(self, url: str) -> str:
        """GET the watch page markup; any non-success status raises RequestFailed."""
        return await self.fetch_text(url)

    async def post_next(self, api_url: str, client_version: str, continuation: str) -> dict[str, Any]:
        body = {
            "context": self.client_context(client_version),
            "continuation": continuation,
        }
        resp = await self._request("POST", api_url, json=body)
        data = resp.json()
        if not isinstance(data, dict):
            return {}
        return data
