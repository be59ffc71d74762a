"""Runtime settings read from the environment."""

from __future__ import annotations

import os


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    return int(raw) if raw else default


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    return float(raw) if raw else default


SHEET_ID = (os.getenv("VENUE_SHEET_ID") or "").strip() or None
SHEET_NAME = (os.getenv("VENUE_SHEET_NAME") or "").strip() or "シート1"

PAGE_SIZE = _int_env("VENUE_PAGE_SIZE", 6)
PAGE_WINDOW = _int_env("VENUE_PAGE_WINDOW", 7)
SUGGESTION_LIMIT = _int_env("VENUE_SUGGESTION_LIMIT", 5)

SEARCH_DELAY_SECONDS = _float_env("VENUE_SEARCH_DELAY", 0.6)
FETCH_TIMEOUT_SECONDS = _float_env("VENUE_FETCH_TIMEOUT", 10.0)
