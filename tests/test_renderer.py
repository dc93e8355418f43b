"""Tests for the article content pipeline in renderer."""

from unittest.mock import patch

import pytest

from petgadget.models.article import Article, BlogDataset, InternalLink
from petgadget.services.data_provider import (
    ArticleNotFoundError,
    StaticBlogDataProvider,
    build_link_table,
)
from petgadget.services.renderer import (
    CONTENT_ERROR_HTML,
    ArticleRenderer,
    render_article,
    render_article_content,
)

_LINKS = build_link_table([InternalLink(id="about", url="/about", text="About Us")])


def _make_article(html_body: str, **overrides) -> Article:
    fields = dict(
        slug="feeder-review",
        page_title="Feeder Review",
        main_category_slug="dog-supplies",
        sub_category_slug="automatic-dog-feeders",
        html_body=html_body,
        date_published="2024-09-20",
    )
    fields.update(overrides)
    return Article(**fields)


class TestRenderArticleContent:
    def test_internal_link_survives_sanitizing(self):
        html = render_article_content(_make_article('<p><InternalLink id="about"/></p>'), _LINKS)
        assert '<a href="/about" class="internal-link">About Us</a>' in html

    def test_broken_link_marker_survives_sanitizing(self):
        html = render_article_content(_make_article('<InternalLink id="Gone"/>'), _LINKS)
        assert html == '<span class="broken-link">[Broken Link: Gone]</span>'

    def test_broken_slash_id_survives_sanitizing(self):
        html = render_article_content(_make_article('<p>See <InternalLink id="dog/beds"/> now</p>'), _LINKS)
        assert html == '<p>See <span class="broken-link">[Broken Link: dog/beds]</span> now</p>'

    def test_preformatted_body_skips_link_resolution(self):
        article = _make_article('<p>x<InternalLink id="about"/></p>', is_preformatted=True)
        html = render_article_content(article, _LINKS)
        assert "About Us" not in html
        assert "broken-link" not in html
        assert html == "<p>x</p>"

    def test_top_pick_and_heading_applied(self):
        article = _make_article("<h2>Pet Gadget Insider's Top Pick</h2><p>PETLIBRO</p>")
        html = render_article_content(article, _LINKS)
        assert html == (
            "<h2 class=\"blog-heading\">Pet Gadget Insider's Top Pick*</h2><p>PETLIBRO</p>"
        )

    def test_top_pick_applied_to_preformatted_body(self):
        article = _make_article("<p>Pet Gadget Insider's Top Pick</p>", is_preformatted=True)
        assert "Top Pick*" in render_article_content(article, _LINKS)

    def test_sanitizer_runs_last(self):
        article = _make_article('<h2 onclick="x()">Q</h2><script>bad()</script>')
        html = render_article_content(article, _LINKS)
        assert html == '<h2 class="blog-heading">Q</h2>'

    def test_external_links_marked(self):
        html = render_article_content(_make_article('<a href="https://akc.org">AKC</a>'), _LINKS)
        assert 'rel="noopener noreferrer nofollow"' in html
        assert 'target="_blank"' in html

    def test_transform_failure_yields_placeholder(self, caplog):
        with patch(
            "petgadget.services.renderer.sanitize", side_effect=RuntimeError("boom")
        ), caplog.at_level("ERROR"):
            html = render_article_content(_make_article("<p>x</p>"), _LINKS)
        assert html == CONTENT_ERROR_HTML
        assert "feeder-review" in caplog.text


class TestRenderArticle:
    def test_structured_data_order_with_everything(self):
        article = _make_article(
            "<h2>Q</h2><p>A</p>", amazon_link="https://www.amazon.com/dp/B0BR5VST5N"
        )
        types = [schema["@type"] for schema in render_article(article, _LINKS).structured_data]
        assert types == ["BlogPosting", "FAQPage", "Product", "BreadcrumbList"]

    def test_optional_schemas_omitted(self):
        types = [
            schema["@type"]
            for schema in render_article(_make_article("<p>No headings</p>"), _LINKS).structured_data
        ]
        assert types == ["BlogPosting", "BreadcrumbList"]

    def test_faq_uses_original_body(self):
        article = _make_article('<h2>Links</h2><p>See <InternalLink id="about"/> now</p>')
        faq = render_article(article, _LINKS).structured_data[1]
        assert faq["@type"] == "FAQPage"
        assert faq["mainEntity"][0]["acceptedAnswer"]["text"] == "See now"

    def test_structured_data_built_even_when_content_fails(self):
        with patch("petgadget.services.renderer.sanitize", side_effect=ValueError("bad")):
            rendered = render_article(_make_article("<h2>Q</h2><p>A</p>"), _LINKS)
        assert rendered.html == CONTENT_ERROR_HTML
        assert rendered.structured_data[0]["@type"] == "BlogPosting"


class TestArticleRenderer:
    def _provider(self) -> StaticBlogDataProvider:
        dataset = BlogDataset(
            articles=[_make_article('<InternalLink id="about"/>', slug="Feeder-Review")],
            internal_links=[InternalLink(id="ABOUT", url="/about", text="About Us")],
        )
        return StaticBlogDataProvider(dataset)

    def test_render_by_slug(self):
        rendered = ArticleRenderer(self._provider()).render("  feeder-review ")
        assert rendered.article.slug == "Feeder-Review"
        assert "About Us" in rendered.html

    def test_missing_slug_raises(self):
        with pytest.raises(ArticleNotFoundError) as excinfo:
            ArticleRenderer(self._provider()).render("nope")
        assert excinfo.value.slug == "nope"
