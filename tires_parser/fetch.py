from __future__ import annotations

from typing import Optional

import requests

from .errors import StatusError, TransportError


# The catalog returns the bare product grid only to AJAX requests.
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def create_session(user_agent: Optional[str] = None) -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "Accept": "*/*",
            "Accept-Language": "en,uk;q=0.9",
            "X-Requested-With": "XMLHttpRequest",
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
        }
    )
    return session


def fetch_html(
    url: str,
    session: Optional[requests.Session] = None,
    timeout_seconds: Optional[float] = None,
) -> str:
    """
    Fetch one listing page and return its body. No retries.
    Raises TransportError on network failure and StatusError for non-200 responses.
    """
    sess = session or create_session()
    try:
        response = sess.get(url, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TransportError(url, exc) from exc
    if response.status_code != 200:
        raise StatusError(url, response.status_code)
    return response.text
