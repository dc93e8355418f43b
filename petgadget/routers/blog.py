import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from petgadget.models.article import Article
from petgadget.models.response import ArticlePageResponse, ArticleSummary
from petgadget.services.data_provider import (
    ArticleNotFoundError,
    BlogDataProvider,
    get_data_provider,
)
from petgadget.services.metadata import build_page_metadata
from petgadget.services.page import render_article_page
from petgadget.services.renderer import ArticleRenderer, RenderedArticle

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


def to_summary(article: Article) -> ArticleSummary:
    return ArticleSummary(
        slug=article.slug,
        title=article.page_title,
        description=article.description,
        main_category_slug=article.main_category_slug,
        sub_category_slug=article.sub_category_slug,
        date_published=article.date_published,
    )


@router.get("/blog", response_model=List[ArticleSummary], summary="List all articles")
@limiter.limit("60/minute")
async def list_articles(
    request: Request, provider: BlogDataProvider = Depends(get_data_provider)
) -> List[ArticleSummary]:
    return [to_summary(article) for article in provider.list_articles()]


@router.get(
    "/blog/{slug}",
    response_model=ArticlePageResponse,
    summary="Render an article with its structured data",
)
@limiter.limit("60/minute")
async def get_article(
    request: Request, slug: str, provider: BlogDataProvider = Depends(get_data_provider)
) -> ArticlePageResponse:
    """Return the sanitized body, the schema.org objects and the head metadata for *slug*."""
    rendered = _render_or_404(provider, slug)
    return ArticlePageResponse(
        slug=rendered.article.slug,
        title=rendered.article.page_title,
        html=rendered.html,
        structured_data=rendered.structured_data,
        metadata=build_page_metadata(rendered.article),
    )


@router.get(
    "/blog/{slug}/page",
    response_class=HTMLResponse,
    summary="Render an article as a complete HTML page",
)
@limiter.limit("60/minute")
async def get_article_page(
    request: Request, slug: str, provider: BlogDataProvider = Depends(get_data_provider)
) -> HTMLResponse:
    rendered = _render_or_404(provider, slug)
    page = render_article_page(rendered, build_page_metadata(rendered.article))
    return HTMLResponse(content=page)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _render_or_404(provider: BlogDataProvider, slug: str) -> RenderedArticle:
    """Render *slug* and turn a missing article into an HTTP 404."""
    logger.info("Article render requested", extra={"slug": slug})
    try:
        return ArticleRenderer(provider).render(slug)
    except ArticleNotFoundError as exc:
        logger.warning("Article not found: %s", exc.slug)
        raise HTTPException(status_code=404, detail="Article not found.")
