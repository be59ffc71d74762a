"""
Feed ingestion: bytes -> text -> rows -> Venues.

Responsibilities:
- encoding detection + decoding
- newline normalization
- tolerant line tokenizing
- header alias resolution
- rejection reporting
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

from charset_normalizer import from_bytes

from .errors import EmptyFeed
from .models import IngestReport, ReportItem, ReportSummary, Venue
from .rules import DELIMITER, GENRE_JOINER, HEADER_ALIASES, QUOTE

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def decode_feed(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode feed bytes to text with LF newlines.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - UTF-8 input starting with a BOM is decoded as utf-8-sig.
    - If decode fails, try UTF-8, then decode with replacement characters.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
            decode_fallback = True
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
            decode_fallback = True

    nl_before = {
        "crlf": text.count("\r\n"),
        "cr": text.count("\r") - text.count("\r\n"),
        "lf": text.count("\n"),
    }
    text = normalize_newlines(text)

    report = {
        "encoding": {
            "detected": detected,
            "decode_used": decode_used,
            "decode_fallback": decode_fallback,
        },
        "newlines": {
            "policy": "lf",
            "before": nl_before,
            "changed": (nl_before["crlf"] > 0) or (nl_before["cr"] > 0),
        },
    }
    return text, report


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _strip_quotes(cell: str) -> str:
    # at most one quote off each end
    if cell.startswith(QUOTE):
        cell = cell[1:]
    if cell.endswith(QUOTE):
        cell = cell[:-1]
    return cell


def parse_csv_line(line: str) -> List[str]:
    """
    Split one line into cells.

    Quotes only toggle whether the delimiter splits; doubled quotes are not
    unescaped and an unterminated quote simply runs to the end of the line.
    """
    cells: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    cells.append("".join(current).strip())

    return [_strip_quotes(cell) for cell in cells]


def _resolve(record: Dict[str, str], field: str) -> Optional[str]:
    for header in HEADER_ALIASES[field]:
        if header in record:
            return record[header]
    return None


def parse_priority(text: Optional[str]) -> Optional[int]:
    """Leading integer of `text`, or None when there is none or it is negative."""
    if text is None:
        return None
    m = _LEADING_INT.match(text)
    if not m:
        return None
    value = int(m.group(1))
    return value if value >= 0 else None


def _normalize(
    header: Sequence[str], row: Sequence[str]
) -> Tuple[Optional[Venue], List[Tuple[str, Optional[str], str, Optional[str]]]]:
    issues = []

    record: Dict[str, str] = {}
    for index, column in enumerate(header):
        record[column] = row[index] if index < len(row) else ""

    def get(field: str) -> str:
        return _resolve(record, field) or ""

    name = get("name").strip()
    if not name:
        issues.append(("missing_name", "name", "dropped", None))
        return None, issues

    # empty components are left out of the joined genre
    genre = GENRE_JOINER.join(g for g in (get("genre"), get("genre2")) if g)

    raw_priority = _resolve(record, "priority")
    priority = parse_priority(raw_priority)
    if priority is None:
        if raw_priority:
            issues.append(("priority_not_integer", "priority", "coerced_to_0", raw_priority))
        priority = 0

    venue = Venue(
        name=name,
        genre=genre,
        link=get("link"),
        location=get("location"),
        station=get("station"),
        station2=get("station2"),
        image=get("image"),
        latitude=get("latitude"),
        longitude=get("longitude"),
        priority=priority,
    )
    return venue, issues


def normalize_row(header: Sequence[str], row: Sequence[str]) -> Optional[Venue]:
    """Map one parsed row onto a Venue; None when the row has no name."""
    venue, _ = _normalize(header, row)
    return venue


def _feed_lines(csv_text: str) -> List[str]:
    text = normalize_newlines(csv_text)
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        raise EmptyFeed()
    return lines


def build_catalog_with_report(csv_text: str) -> tuple[List[Venue], List[ReportItem], int]:
    lines = _feed_lines(csv_text)

    header = parse_csv_line(lines[0])
    logger.info("header: %s", header)

    venues: List[Venue] = []
    warnings: List[ReportItem] = []
    for offset, line in enumerate(lines[1:], start=2):
        venue, issues = _normalize(header, parse_csv_line(line))
        for issue, column, action, value in issues:
            warnings.append(ReportItem(row=offset, column=column, issue=issue, value=value, action=action))
        if venue is not None:
            venues.append(venue)

    rows = len(lines) - 1
    logger.info("normalized %d venues from %d rows", len(venues), rows)
    return venues, warnings, rows


def build_catalog(csv_text: str) -> List[Venue]:
    """
    Parse a whole feed into Venues, in row order.

    Raises EmptyFeed when the text has no non-blank line.
    """
    venues, _, _ = build_catalog_with_report(csv_text)
    return venues


def ingest_feed(raw: bytes) -> tuple[List[Venue], IngestReport]:
    text, normalizations = decode_feed(raw)
    venues, warnings, rows = build_catalog_with_report(text)

    report = IngestReport(
        summary=ReportSummary(
            rows=rows,
            venues=len(venues),
            rejected=rows - len(venues),
            warnings=len(warnings),
        ),
        normalizations=normalizations,
        warnings=warnings,
    )
    return venues, report
