from typing import Optional

import httpx

from ..config import Settings


def build_async_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    """
    create the http client shared by every repository in the process.

    args:
        settings: timeout and user agent to apply. defaults to `Settings()`.
    """
    settings = settings or Settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout),
        follow_redirects=True,
        headers=headers,
    )
