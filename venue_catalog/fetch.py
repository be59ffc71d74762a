from __future__ import annotations

import logging
import urllib.parse

import requests

from . import config
from .errors import FeedFetchError
from .normalize import decode_feed

logger = logging.getLogger(__name__)

SHEETS_BASE = "https://docs.google.com/spreadsheets/d"


def sheet_csv_url(sheet_id: str, sheet_name: str = config.SHEET_NAME) -> str:
    """CSV export URL for one tab of a Google Sheet."""
    query = urllib.parse.urlencode({"tqx": "out:csv", "sheet": sheet_name})
    return f"{SHEETS_BASE}/{sheet_id}/gviz/tq?{query}"


def fetch_feed_bytes(url: str, timeout: float = config.FETCH_TIMEOUT_SECONDS) -> bytes:
    logger.info("fetching feed from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FeedFetchError(f"データの取得に失敗しました: {e}") from e

    if not response.ok:
        raise FeedFetchError(f"HTTP {response.status_code}: {response.reason}")
    return response.content


def fetch_feed(url: str, timeout: float = config.FETCH_TIMEOUT_SECONDS) -> str:
    text, _ = decode_feed(fetch_feed_bytes(url, timeout))
    return text
