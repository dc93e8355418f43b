import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import RedirectResponse

from petgadget.models.response import SearchResponse
from petgadget.routers.blog import limiter, to_summary
from petgadget.services.data_provider import BlogDataProvider, get_data_provider
from petgadget.services.search import build_search_path, search_articles

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/search/go", summary="Redirect a search-box submission")
@limiter.limit("30/minute")
async def search_redirect(
    request: Request, q: str = Query(default="", description="Raw search-box text.")
) -> RedirectResponse:
    """Send the browser to ``/search?q=…`` for the trimmed query."""
    target = build_search_path(q)
    if target is None:
        raise HTTPException(status_code=400, detail="Search query must not be empty.")
    return RedirectResponse(url=target, status_code=303)


@router.get("/search", response_model=SearchResponse, summary="Search articles")
@limiter.limit("30/minute")
async def search(
    request: Request,
    q: str = Query(default=""),
    provider: BlogDataProvider = Depends(get_data_provider),
) -> SearchResponse:
    return _search(provider, q)


@router.get("/search/{term}", response_model=SearchResponse, summary="Search articles by path term")
@limiter.limit("30/minute")
async def search_by_term(
    request: Request, term: str, provider: BlogDataProvider = Depends(get_data_provider)
) -> SearchResponse:
    """Path form used by the landing-page feature tiles, e.g. ``/search/smart%20app``."""
    return _search(provider, term)


def _search(provider: BlogDataProvider, query: str) -> SearchResponse:
    results = search_articles(provider.list_articles(), query)
    logger.info("Search for %r matched %d articles", query, len(results))
    return SearchResponse(query=query, results=[to_summary(a) for a in results])
