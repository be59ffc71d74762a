import pytest

from venue_catalog.catalog import CatalogStore
from venue_catalog.main import app

FEED = "\n".join([
    "店名,ジャンル,ジャンル2,マップ,地名,駅名,駅名2,画像,緯度,経度,優先度",
    '"ラーメン太郎",ラーメン,,https://maps.example/1,奈良市,ナラ駅,,,34.68,135.82,1',
    '"Udon, Soba",うどん,そば,https://maps.example/2,京都市,京都駅,四条駅,,35.0,135.7,0',
    "すし処,すし,,,大阪市,梅田駅,,,,,2",
    ",カレー,,,奈良市,,,,,,5",
    "カレー亭,カレー,ラーメン,,奈良市,近鉄奈良駅,,,,,abc",
])


@pytest.fixture
def feed():
    return FEED


@pytest.fixture
def store():
    s = CatalogStore()
    s.refresh(FEED)
    return s


@pytest.fixture
def client_store():
    # fresh catalog per test; the app keeps it on app.state
    previous = app.state.catalog
    app.state.catalog = CatalogStore()
    yield app.state.catalog
    app.state.catalog = previous
