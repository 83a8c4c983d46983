from __future__ import annotations

import logging
from pathlib import Path

import requests

"""Source retrieval: one-shot fetch of the published CSV (no retry)."""

__all__ = [
    "FetchError",
    "fetch_csv_text",
    "read_csv_file",
]

logger = logging.getLogger(__name__)

HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class FetchError(Exception):
    """Network failure or non-success HTTP status while fetching the source."""


def fetch_csv_text(url: str, timeout: float = 10.0) -> str:
    """GET ``url`` and return the body as text.

    The body is decoded as ``utf-8-sig``: published sheets are UTF-8 but are
    often served as ``text/csv`` without a charset.

    Raises:
        FetchError: On connection errors, timeouts or non-2xx status. The
            message carries the cause (e.g. ``HTTP 404``).
    """
    logger.debug(f"fetch: GET {url} timeout={timeout}")
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(str(e) or e.__class__.__name__) from e
    if not 200 <= resp.status_code < 300:
        raise FetchError(f"HTTP {resp.status_code}")
    return resp.content.decode("utf-8-sig", errors="replace")


def read_csv_file(path: Path) -> str:
    """Read a local CSV export (offline alternative to the URL)."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise FetchError(f"cannot read {path}: {e}") from e
