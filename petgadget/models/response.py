from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class ArticleSummary(BaseModel):
    slug: str
    title: str
    description: str
    main_category_slug: str
    sub_category_slug: str
    date_published: str


class PageMetadata(BaseModel):
    """Head metadata for an article page (title, keywords, social cards)."""

    title: str
    description: str
    metadata_base: Optional[str] = None
    keywords: List[str] = []
    open_graph: Optional[Dict[str, Any]] = None
    twitter: Optional[Dict[str, Any]] = None


class ArticlePageResponse(BaseModel):
    slug: str
    title: str
    html: str
    structured_data: List[Dict[str, Any]]
    """schema.org objects, each ready to embed as an ``application/ld+json`` payload."""
    metadata: PageMetadata


class SearchResponse(BaseModel):
    query: str
    results: List[ArticleSummary]
