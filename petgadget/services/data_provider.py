"""Read-only access to the static blog dataset.

The pipeline never reads the dataset file directly.  It goes through a
:class:`BlogDataProvider`, so tests and alternative build contexts can hand
in their own fixtures.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from petgadget import config
from petgadget.models.article import Article, BlogDataset, InternalLink, MainCategory, SubCategory

logger = logging.getLogger(__name__)


class ArticleNotFoundError(LookupError):
    """Raised when no article matches a requested slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"No article with slug '{slug}'.")
        self.slug = slug


class BlogDataProvider(Protocol):
    def get_article(self, slug: str) -> Optional[Article]: ...

    def list_articles(self) -> List[Article]: ...

    def link_table(self) -> Dict[str, InternalLink]: ...

    def get_main_category(self, slug: str) -> Optional[MainCategory]: ...

    def get_sub_categories(self, main_slug: str) -> List[SubCategory]: ...


def _normalize_slug(slug: str) -> str:
    return slug.strip().lower()


def build_link_table(links: List[InternalLink]) -> Dict[str, InternalLink]:
    """Key *links* by lowercased id; a later duplicate id wins."""
    return {link.id.lower(): link for link in links}


class StaticBlogDataProvider:
    """:class:`BlogDataProvider` backed by an in-memory :class:`BlogDataset`."""

    def __init__(self, dataset: BlogDataset) -> None:
        self._dataset = dataset
        self._articles = {_normalize_slug(a.slug): a for a in dataset.articles}
        self._links = build_link_table(dataset.internal_links)

    def get_article(self, slug: str) -> Optional[Article]:
        return self._articles.get(_normalize_slug(slug))

    def list_articles(self) -> List[Article]:
        return list(self._dataset.articles)

    def link_table(self) -> Dict[str, InternalLink]:
        return dict(self._links)

    def get_main_category(self, slug: str) -> Optional[MainCategory]:
        wanted = _normalize_slug(slug)
        for category in self._dataset.main_categories:
            if _normalize_slug(category.slug) == wanted:
                return category
        return None

    def get_sub_categories(self, main_slug: str) -> List[SubCategory]:
        wanted = _normalize_slug(main_slug)
        return [
            sub
            for sub in self._dataset.sub_categories
            if _normalize_slug(sub.main_category_slug) == wanted
        ]


def load_dataset(path: Path) -> BlogDataset:
    """Read and validate the blog dataset at *path*.

    Raises:
        OSError: if the file cannot be read.
        pydantic.ValidationError: if the JSON does not match :class:`BlogDataset`.
    """
    raw = Path(path).read_text(encoding="utf-8")
    dataset = BlogDataset.model_validate_json(raw)
    logger.info(
        "Loaded blog dataset from %s (%d articles, %d internal links)",
        path,
        len(dataset.articles),
        len(dataset.internal_links),
    )
    return dataset


@lru_cache(maxsize=1)
def get_data_provider() -> BlogDataProvider:
    """FastAPI dependency: the provider for the configured dataset, loaded once."""
    return StaticBlogDataProvider(load_dataset(config.DATA_PATH))
