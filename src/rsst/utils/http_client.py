"""HTTP client utilities.

rsst resolves redirects itself, so every client it creates has automatic
redirect following switched off.
"""

import httpx

from rsst.config.settings import get_settings


def create_http_client(
    timeout: float | None = None,
    user_agent: str | None = None,
) -> httpx.AsyncClient:
    """Create an async HTTP client for feed requests.

    Args:
        timeout: Request timeout in seconds. Defaults to ``get_settings().http_timeout``.
        user_agent: User-Agent header value. Defaults to ``get_settings().user_agent``;
            when both are unset the httpx default is kept.

    Returns:
        Configured httpx.AsyncClient with ``follow_redirects=False``.
    """
    settings = get_settings()
    user_agent = user_agent or settings.user_agent
    headers = {"User-Agent": user_agent} if user_agent else None
    return httpx.AsyncClient(
        timeout=timeout if timeout is not None else settings.http_timeout,
        headers=headers,
        follow_redirects=False,
    )
