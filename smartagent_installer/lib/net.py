from __future__ import annotations

import logging
from pathlib import Path

import requests

from ..errors import FetchFailed

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 30.0


def fetch_text(url: str, *, timeout_s: float = DEFAULT_TIMEOUT_S) -> str:
    """GET a URL and return its body, raising FetchFailed on any HTTP/network error."""

    logger.debug("GET %s", url)
    try:
        r = requests.get(url, timeout=timeout_s)
        r.raise_for_status()
    except requests.RequestException as e:
        raise FetchFailed(url, str(e)) from e
    return r.text


def download(url: str, dest: Path, *, timeout_s: float = DEFAULT_TIMEOUT_S) -> Path:
    body = fetch_text(url, timeout_s=timeout_s)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(body, encoding="utf-8")
    return dest
