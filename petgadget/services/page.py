"""Assemble a complete HTML document for a rendered article."""

import json
from html import escape
from typing import Any, Dict, List

from petgadget.models.response import PageMetadata
from petgadget.services.renderer import RenderedArticle

AFFILIATE_DISCLOSURE = "(Disclosure: Affiliate link)"

_AUTHOR_NOTE = (
    "* Pet Gadget Insider uses data-driven technology to present the products "
    "Amazon says are top-rated best sellers. Out of those, I choose one I think "
    "you'll like the most. Once you've received it, let me know what you think! - "
    '<a href="/about">Nick</a>, Pet Gadget Insider'
)


def json_ld_script(data: Dict[str, Any]) -> str:
    """Serialize *data* as an ``application/ld+json`` script element.

    ``</`` is escaped so the payload cannot close the script element early.
    """
    payload = json.dumps(data, ensure_ascii=False).replace("</", "<\\/")
    return f'<script type="application/ld+json">{payload}</script>'


def _head(metadata: PageMetadata, structured_data: List[Dict[str, Any]]) -> str:
    parts = [
        '<meta charset="utf-8">',
        f"<title>{escape(metadata.title)}</title>",
        f'<meta name="description" content="{escape(metadata.description)}">',
    ]
    if metadata.keywords:
        parts.append(f'<meta name="keywords" content="{escape(", ".join(metadata.keywords))}">')
    parts.extend(json_ld_script(schema) for schema in structured_data)
    return "\n".join(parts)


def render_article_page(rendered: RenderedArticle, metadata: PageMetadata) -> str:
    """Return the full HTML page for *rendered*; the body HTML is already sanitized."""
    article = rendered.article
    dates = [f"<span>Published: {escape(article.date_published)}</span>"]
    if article.date_modified:
        dates.append(f"<span>Updated: {escape(article.date_modified)}</span>")

    body = [
        '<div class="blog-article">',
        "<header>",
        f"<h1>{escape(article.page_title)}</h1>",
        f'<div class="article-dates">{"".join(dates)}</div>',
        "</header>",
    ]
    if article.featured_image_url:
        body.append(
            f'<figure><img src="{escape(article.featured_image_url)}" '
            f'alt="{escape(article.featured_image_alt)}"></figure>'
        )
    body.extend(
        [
            '<div class="prose">',
            f'<div class="article-description">{escape(article.description)}</div>',
            rendered.html,
            "</div>",
        ]
    )
    if article.amazon_link:
        body.append(
            '<div class="affiliate-cta">'
            f'<a href="{escape(article.amazon_link)}" target="_blank" '
            'rel="noopener noreferrer nofollow">View on Amazon</a>'
            f"<p>{AFFILIATE_DISCLOSURE}</p>"
            "</div>"
        )
    body.append(f'<div class="author-note"><p>{_AUTHOR_NOTE}</p></div>')
    body.append("</div>")

    body_html = "\n".join(body)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        f"<head>\n{_head(metadata, rendered.structured_data)}\n</head>\n"
        f"<body>\n{body_html}\n</body>\n"
        "</html>\n"
    )
