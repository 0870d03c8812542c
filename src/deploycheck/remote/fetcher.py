from __future__ import annotations

from typing import Optional

import httpx

from deploycheck.errors import HTTPStatusError, NetworkError


class RemoteFetcher:
    """Single-attempt HTTPS GET of deployed assets.

    No timeout, retry or redirect following: any failure reaches the caller.
    """

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=None, follow_redirects=False)

    def fetch_text(self, url: str) -> str:
        try:
            response = self._client.get(url)
        except httpx.TransportError as exc:
            raise NetworkError(f"{type(exc).__name__}: {exc}", url) from exc
        if response.status_code != 200:
            raise HTTPStatusError(response.status_code, url)
        return response.content.decode("utf-8", errors="replace")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RemoteFetcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
