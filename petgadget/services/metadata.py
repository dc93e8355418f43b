"""Head metadata (title, keywords, Open Graph, Twitter card) for article pages."""

from typing import Optional, Sequence

from petgadget import config
from petgadget.models.article import Article
from petgadget.models.response import PageMetadata
from petgadget.services.keywords import get_keywords, is_dog_article
from petgadget.services.schema import DEFAULT_AUTHOR

NOT_FOUND_METADATA = PageMetadata(
    title="Article Not Found",
    description="The requested article could not be found",
)


def build_page_metadata(
    article: Optional[Article], parent_keywords: Sequence[str] = ()
) -> PageMetadata:
    """Return the page metadata for *article*.

    *parent_keywords* are site-level keywords appended after the article's
    own.  A missing article yields :data:`NOT_FOUND_METADATA`.
    """
    if article is None:
        return NOT_FOUND_METADATA.model_copy(deep=True)

    title = article.title_tag or article.page_title
    description = article.meta_description or article.description
    author_name = article.author.name if article.author else DEFAULT_AUTHOR.name

    return PageMetadata(
        title=title,
        description=description,
        metadata_base=config.SITE_URL,
        keywords=get_keywords(is_dog_article(article.main_category_slug)) + list(parent_keywords),
        open_graph={
            "title": title,
            "description": description,
            "images": [
                {
                    "url": article.featured_image_url,
                    "width": 800,
                    "height": 600,
                    "alt": article.featured_image_alt,
                }
            ],
            "publishedTime": article.date_published,
            "modifiedTime": article.date_modified or article.date_published,
            "authors": [author_name],
        },
        twitter={
            "card": "summary_large_image",
            "title": title,
            "description": description,
            "images": [article.featured_image_url],
        },
    )
