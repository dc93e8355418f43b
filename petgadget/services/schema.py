"""schema.org structured-data builders for article pages."""

from typing import Any, Dict, Optional

from petgadget import config
from petgadget.models.article import Article, Author
from petgadget.services.keywords import get_keywords, is_dog_article

SCHEMA_CONTEXT = "https://schema.org"

# Affiliate prices are unknown at build time; never assert a real one.
PLACEHOLDER_PRICE = "0"

DEFAULT_AUTHOR = Author(
    name="Nick Garcia",
    url=f"{config.SITE_URL}/about",
    image="/images/nickgarcia.png",
)

_PUBLISHER_LOGO = "/images/Logo/pet-gadget-insider-logo.png"


def article_url(article: Article) -> str:
    return f"{config.SITE_URL}/blog/{article.slug}"


def _description(article: Article) -> str:
    return article.meta_description or article.description


def build_author_schema(author: Optional[Author] = None) -> Dict[str, Any]:
    author = author or DEFAULT_AUTHOR
    schema: Dict[str, Any] = {"@type": "Person", "name": author.name}
    if author.url:
        schema["url"] = author.url
    if author.image:
        schema["image"] = author.image
    if author.same_as:
        schema["sameAs"] = list(author.same_as)
    return schema


def build_article_schema(article: Article) -> Dict[str, Any]:
    """Return the BlogPosting object for *article*."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": article.page_title,
        "description": _description(article),
        "image": {
            "@type": "ImageObject",
            "url": article.featured_image_url,
            "width": "720",
            "height": "405",
            "caption": article.featured_image_alt,
        },
        "datePublished": article.date_published,
        "dateModified": article.date_modified or article.date_published,
        "author": build_author_schema(article.author),
        "publisher": {
            "@type": "Organization",
            "name": config.SITE_NAME,
            "logo": {
                "@type": "ImageObject",
                "url": _PUBLISHER_LOGO,
                "width": "300",
                "height": "60",
            },
        },
        "mainEntityOfPage": {"@type": "WebPage", "@id": article_url(article)},
        "articleSection": article.sub_category_name,
    }


def build_product_schema(article: Article) -> Optional[Dict[str, Any]]:
    """Return the Product object for an affiliate article, otherwise ``None``.

    The offer price is always :data:`PLACEHOLDER_PRICE`.
    """
    if not article.amazon_link:
        return None

    keywords = get_keywords(is_dog_article(article.main_category_slug))
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Product",
        "name": article.page_title,
        "description": _description(article),
        "image": article.featured_image_url,
        "keywords": ", ".join(keywords),
        "offers": {
            "@type": "Offer",
            "url": article.amazon_link,
            "priceCurrency": "USD",
            "price": PLACEHOLDER_PRICE,
            "availability": "https://schema.org/InStock",
            "seller": {"@type": "Organization", "name": "Amazon"},
        },
        "brand": {"@type": "Brand", "name": "Various Brands"},
    }


def build_breadcrumb_schema(article: Article) -> Dict[str, Any]:
    category_url = f"{config.SITE_URL}/blog/category/{article.main_category_slug}"
    trail = [
        ("Home", config.SITE_URL),
        ("Pet Supplies Reviews", f"{config.SITE_URL}/blog"),
        (article.main_category_name, category_url),
        (article.sub_category_name, f"{category_url}/{article.sub_category_slug}"),
        (article.page_title, article_url(article)),
    ]
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": position, "name": name, "item": item}
            for position, (name, item) in enumerate(trail, start=1)
        ],
    }
