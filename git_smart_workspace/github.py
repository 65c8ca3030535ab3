"""Minimal GitHub REST client."""

from __future__ import annotations

import logging

import requests

from .exceptions import RemoteLookupError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10
DEFAULT_HEADERS = {
    "Accept": "*/*",
    "User-Agent": "git-smart-workspace",
}


def user_exists(user: str, *, api_url: str = "https://api.github.com") -> bool:
    url = f"{api_url.rstrip('/')}/users/{user}"
    logger.debug("Checking GitHub user: %s", url)
    try:
        response = requests.get(url, headers=DEFAULT_HEADERS, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise RemoteLookupError(f"Unable to reach {url}: {exc}") from exc
    return 200 <= response.status_code < 300
