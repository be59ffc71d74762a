import logging

from fastapi import FastAPI, UploadFile, File, HTTPException, Query

from . import config
from .catalog import CatalogStore
from .errors import EmptyFeed, FeedFetchError
from .fetch import fetch_feed_bytes, sheet_csv_url
from .models import (
    CatalogStatus,
    HealthResponse,
    IngestResponse,
    SearchResponse,
    SuggestionResponse,
)
from .paginate import paginate, visible_page_numbers
from .search import search as search_venues
from .suggest import genre_domain, location_domain, suggestions

logger = logging.getLogger(__name__)

app = FastAPI(
    title="venue-catalog",
    description="Searchable venue catalog built from a spreadsheet CSV feed",
    version="0.1.0",
)
app.state.catalog = CatalogStore()


def _store() -> CatalogStore:
    return app.state.catalog


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/catalog", response_model=CatalogStatus)
def catalog_status():
    store = _store()
    return {"venues": len(store), "loaded": store.loaded, "last_error": store.last_error}


@app.post("/catalog", response_model=IngestResponse)
async def upload_catalog(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    try:
        report = _store().refresh_bytes(raw)
    except EmptyFeed as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"venues": len(_store()), "report": report}


@app.post("/catalog/refresh", response_model=IngestResponse)
def refresh_catalog():
    if not config.SHEET_ID:
        raise HTTPException(status_code=503, detail="VENUE_SHEET_ID is not configured")

    store = _store()
    try:
        raw = fetch_feed_bytes(sheet_csv_url(config.SHEET_ID, config.SHEET_NAME))
    except FeedFetchError as e:
        store.fail(e)
        raise HTTPException(status_code=502, detail=str(e))
    try:
        report = store.refresh_bytes(raw)
    except EmptyFeed as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.info("catalog refreshed from sheet: %d venues, %d rejected", len(store), report.summary.rejected)
    return {"venues": len(store), "report": report}


@app.get("/search", response_model=SearchResponse)
def search(
    location: str = "",
    genre: str = "",
    page: int = Query(default=1),
    page_size: int = Query(default=config.PAGE_SIZE, ge=1),
):
    results = search_venues(_store().venues, location, genre)
    current = paginate(results, page_size, page)
    return {
        "items": current.items,
        "total": len(results),
        "total_pages": current.total_pages,
        "page": page,
        "pages": visible_page_numbers(current.total_pages, page, config.PAGE_WINDOW),
    }


@app.get("/suggestions/location", response_model=SuggestionResponse)
def location_suggestions(q: str = ""):
    domain = location_domain(_store().venues)
    return {"query": q, "suggestions": suggestions(q, domain, config.SUGGESTION_LIMIT)}


@app.get("/suggestions/genre", response_model=SuggestionResponse)
def genre_suggestions(q: str = ""):
    domain = genre_domain(_store().venues)
    return {"query": q, "suggestions": suggestions(q, domain, config.SUGGESTION_LIMIT)}
