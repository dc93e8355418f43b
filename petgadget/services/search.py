"""Search-box redirect target and a plain article lookup behind it."""

from typing import Iterable, List, Optional
from urllib.parse import quote

from petgadget.models.article import Article

SEARCH_PATH = "/search"

# Characters encodeURIComponent leaves untouched besides ASCII letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_search_path(query: str) -> Optional[str]:
    """Return ``/search?q=<query>`` for a non-blank *query*, otherwise ``None``."""
    trimmed = query.strip()
    if not trimmed:
        return None
    return f"{SEARCH_PATH}?q={quote(trimmed, safe=_URI_COMPONENT_SAFE)}"


def _haystack(article: Article) -> str:
    fields = (
        article.page_title,
        article.description,
        article.meta_description,
        article.main_category_name,
        article.sub_category_name,
    )
    return " ".join(fields).lower()


def search_articles(articles: Iterable[Article], query: str) -> List[Article]:
    """Return the articles whose text fields contain every term of *query*.

    Matching is case-insensitive; a blank query matches nothing.
    """
    terms = query.lower().split()
    if not terms:
        return []
    return [a for a in articles if all(term in _haystack(a) for term in terms)]
