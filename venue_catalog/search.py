"""
Text matching and ranked search over the catalog.

Matching folds katakana onto hiragana so either script finds the other, and
nothing else: no case folding, no width folding, no kanji readings.

Ranking orders by priority (high first) and then by name in Japanese
dictionary (gojuon) order. Kana compare by sound; every kana name sorts
before any kanji name, and kanji compare by code point.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Iterable, List, Tuple

from .models import Venue
from .rules import LOCATION_FIELDS

KATAKANA_FIRST = 0x30A1  # ァ
KATAKANA_LAST = 0x30F6  # ヶ
KANA_OFFSET = 0x60

_VOICING_MARKS = {"\u3099", "\u309a"}

_SMALL_KANA = str.maketrans("ぁぃぅぇぉっゃゅょゎゕゖ", "あいうえおつやゆよわかけ")

_VOWEL_OF = {}
for _vowel, _row in (
    ("あ", "あかさたなはまやらわがざだばぱ"),
    ("い", "いきしちにひみりぎじぢびぴ"),
    ("う", "うくすつぬふむゆるぐずづぶぷゔ"),
    ("え", "えけせてねへめれげぜでべぺ"),
    ("お", "おこそとのほもよろをごぞどぼぽ"),
):
    for _kana in _row:
        _VOWEL_OF[_kana] = _vowel

# script groups, in collation order
OTHER, KANA, HAN = 0, 1, 2


def to_hiragana(text: str) -> str:
    if not text:
        return ""
    return "".join(
        chr(ord(ch) - KANA_OFFSET) if KATAKANA_FIRST <= ord(ch) <= KATAKANA_LAST else ch
        for ch in text
    )


def matches(haystack: str, needle: str) -> bool:
    """True when `needle` is blank or occurs in `haystack`, kana-folded."""
    if not needle or not needle.strip():
        return True
    return to_hiragana(needle) in to_hiragana(haystack or "")


def _expand_prolonged(reading: str) -> str:
    out = []
    for ch in reading:
        if ch == "ー" and out:
            ch = _VOWEL_OF.get(out[-1], ch)
        out.append(ch)
    return "".join(out)


def _strip_voicing(reading: str) -> str:
    decomposed = unicodedata.normalize("NFD", reading)
    return unicodedata.normalize("NFC", "".join(ch for ch in decomposed if ch not in _VOICING_MARKS))


def script_group(ch: str) -> int:
    cp = ord(ch)
    if 0x3041 <= cp <= 0x30FF:
        return KANA
    if (
        0x3400 <= cp <= 0x9FFF
        or 0xF900 <= cp <= 0xFAFF
        or cp >= 0x20000
        or ch in "々〆"
    ):
        return HAN
    return OTHER


@lru_cache(maxsize=4096)
def collation_key(name: str) -> Tuple[Tuple[Tuple[int, str], ...], str, str]:
    reading = _expand_prolonged(to_hiragana(name).translate(_SMALL_KANA))
    primary = tuple((script_group(ch), ch) for ch in _strip_voicing(reading))
    return primary, reading, name


def _location_hit(venue: Venue, query: str) -> bool:
    return any(matches(getattr(venue, field), query) for field in LOCATION_FIELDS)


def filter_venues(catalog: Iterable[Venue], location_query: str, genre_query: str) -> List[Venue]:
    return [
        venue
        for venue in catalog
        if _location_hit(venue, location_query) and matches(venue.genre, genre_query)
    ]


def rank(venues: Iterable[Venue]) -> List[Venue]:
    # sorted() is stable; equal keys keep catalog order
    return sorted(venues, key=lambda v: (-v.priority, collation_key(v.name)))


def search(catalog: Iterable[Venue], location_query: str = "", genre_query: str = "") -> List[Venue]:
    return rank(filter_venues(catalog, location_query or "", genre_query or ""))
