from venue_catalog.suggest import genre_domain, location_domain, suggestions, unique


def test_location_domain_is_locations_then_stations(store):
    assert location_domain(store.venues) == [
        "奈良市", "京都市", "大阪市",
        "ナラ駅", "京都駅", "梅田駅", "近鉄奈良駅",
        "四条駅",
    ]


def test_genre_domain_splits_and_dedupes(store):
    assert genre_domain(store.venues) == ["ラーメン", "うどん", "そば", "すし", "カレー"]


def test_empty_partial_gives_nothing(store):
    assert suggestions("", location_domain(store.venues)) == []


def test_truncated_to_limit_in_first_seen_order():
    domain = [f"駅{i}" for i in range(8)] + ["町"]
    assert suggestions("駅", domain) == ["駅0", "駅1", "駅2", "駅3", "駅4"]
    assert suggestions("駅", domain, limit=2) == ["駅0", "駅1"]


def test_kana_folded_suggestions(store):
    assert suggestions("なら", location_domain(store.venues)) == ["ナラ駅"]
    assert suggestions("奈良", location_domain(store.venues)) == ["奈良市", "近鉄奈良駅"]
    assert suggestions("れー", genre_domain(store.venues)) == ["カレー"]


def test_blank_and_duplicate_candidates_dropped():
    assert unique(["a", "", "b", "a", None, "c"]) == ["a", "b", "c"]
    assert suggestions("a", ["", "a", "a", "ab"]) == ["a", "ab"]
