"""Article content pipeline.

The body is transformed in a fixed order: internal links, Top Pick
annotation, heading classes, then the allow-list sanitizer, which always
runs last.  Structured data is built from the article record and its
original, unsanitized body.
"""

import logging
from typing import Any, Dict, List, Mapping, NamedTuple

from petgadget.models.article import Article, InternalLink
from petgadget.services.data_provider import ArticleNotFoundError, BlogDataProvider
from petgadget.services.decorator import decorate_headings, mark_top_picks
from petgadget.services.faq import build_faq_schema
from petgadget.services.linker import resolve_internal_links
from petgadget.services.sanitizer import sanitize
from petgadget.services.schema import (
    build_article_schema,
    build_breadcrumb_schema,
    build_product_schema,
)

logger = logging.getLogger(__name__)

CONTENT_ERROR_HTML = '<div class="text-red-500">Error loading content</div>'


class RenderedArticle(NamedTuple):
    article: Article
    html: str
    structured_data: List[Dict[str, Any]]


def transform_content(article: Article, link_table: Mapping[str, InternalLink]) -> str:
    """Run the body of *article* through the transform chain and sanitize it.

    Preformatted bodies skip internal-link resolution.
    """
    html = article.html_body
    if not article.is_preformatted:
        html = resolve_internal_links(html, link_table)
    html = mark_top_picks(html)
    html = decorate_headings(html)
    return sanitize(html)


def render_article_content(article: Article, link_table: Mapping[str, InternalLink]) -> str:
    """Like :func:`transform_content`, but a failure yields :data:`CONTENT_ERROR_HTML`."""
    try:
        return transform_content(article, link_table)
    except Exception:
        logger.exception("Error rendering content for article %s", article.slug)
        return CONTENT_ERROR_HTML


def build_structured_data(article: Article) -> List[Dict[str, Any]]:
    """Return BlogPosting, FAQPage (if any), Product (if any) and BreadcrumbList."""
    candidates = [
        build_article_schema(article),
        build_faq_schema(article.html_body),
        build_product_schema(article),
        build_breadcrumb_schema(article),
    ]
    return [schema for schema in candidates if schema is not None]


def render_article(article: Article, link_table: Mapping[str, InternalLink]) -> RenderedArticle:
    return RenderedArticle(
        article=article,
        html=render_article_content(article, link_table),
        structured_data=build_structured_data(article),
    )


class ArticleRenderer:
    """Render articles by slug from an injected :class:`BlogDataProvider`."""

    def __init__(self, provider: BlogDataProvider) -> None:
        self.provider = provider

    def render(self, slug: str) -> RenderedArticle:
        """Render the article for *slug*.

        Raises:
            ArticleNotFoundError: if no article matches *slug*.
        """
        article = self.provider.get_article(slug)
        if article is None:
            raise ArticleNotFoundError(slug)
        return render_article(article, self.provider.link_table())
