"""
Deterministic ingestion rules.

The feed is a spreadsheet export whose column headers drifted between a
Japanese-only and a bilingual spelling. Each logical field lists the headers
it accepts, in the order they are tried.
"""

DELIMITER = ","
QUOTE = '"'
GENRE_JOINER = ", "

HEADER_ALIASES = {
    "name": ("店名", "name(店名)"),
    "genre": ("ジャンル", "genre1"),
    "genre2": ("ジャンル2", "genre2"),
    "link": ("マップ", "link(Gmap)"),
    "location": ("地名", "location(市)"),
    "station": ("駅名", "station1(駅)"),
    "station2": ("駅名2", "station2(駅)"),
    "image": ("画像", "image(画像)"),
    "latitude": ("緯度", "lat(緯度)"),
    # the sheet really spells it 軽度
    "longitude": ("経度", "lng(軽度)"),
    "priority": ("優先度", "priority"),
}

LOCATION_FIELDS = ("location", "station", "station2")
