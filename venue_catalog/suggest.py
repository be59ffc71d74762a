from __future__ import annotations

from typing import Iterable, List

from .models import Venue
from .rules import LOCATION_FIELDS
from .search import matches


def unique(values: Iterable[str]) -> List[str]:
    """Drop blanks and repeats, keeping first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


def location_domain(catalog: Iterable[Venue]) -> List[str]:
    venues = list(catalog)
    # every location first, then every station, then every station2
    return unique(getattr(venue, field) for field in LOCATION_FIELDS for venue in venues)


def genre_domain(catalog: Iterable[Venue]) -> List[str]:
    return unique(token.strip() for venue in catalog for token in venue.genre.split(","))


def suggestions(partial: str, domain: Iterable[str], limit: int = 5) -> List[str]:
    if not partial:
        return []
    out: List[str] = []
    for candidate in unique(domain):
        if len(out) >= limit:
            break
        if matches(candidate, partial):
            out.append(candidate)
    return out
