"""Tests for the HTTP routers.

The data provider dependency is overridden with an in-memory dataset so the
tests never depend on the bundled sample file.
"""

import json

import pytest
from fastapi.testclient import TestClient

from petgadget import config
from petgadget.main import app
from petgadget.models.article import Article, BlogDataset, InternalLink
from petgadget.services.data_provider import StaticBlogDataProvider, get_data_provider
from petgadget.services.renderer import CONTENT_ERROR_HTML

client = TestClient(app)

_DATASET = BlogDataset(
    articles=[
        Article(
            slug="best-cat-feeder",
            page_title="Best Cat Feeder",
            title_tag="Best Cat Feeder (Tested)",
            description="Timed feeders compared.",
            meta_description="Our favourite timed cat feeders.",
            featured_image_url="/images/cat.png",
            featured_image_alt="Cat feeder",
            main_category_slug="cat-supplies",
            main_category_name="Cat Supplies",
            sub_category_slug="automatic-cat-feeders",
            sub_category_name="Automatic Cat Feeders",
            html_body=(
                "<p>Pet Gadget Insider's Top Pick. See <InternalLink id=\"about\"/>.</p>"
                "<h2>Why a timer?</h2><p>Consistent meals.</p>"
                "<script>alert('x')</script>"
            ),
            amazon_link="https://www.amazon.com/dp/B0B1TMLL3F",
            date_published="2024-11-02",
            date_modified="2025-01-15",
        ),
        Article(
            slug="dog-fountain",
            page_title="Dog Water Fountain",
            description="Fresh water for dogs.",
            main_category_slug="dog-supplies",
            main_category_name="Dog Supplies",
            sub_category_slug="fountains",
            sub_category_name="Fountains",
            html_body="<p>No FAQ here.</p>",
            date_published="2024-09-20",
        ),
    ],
    internal_links=[InternalLink(id="about", url="/about", text="About Us")],
)


@pytest.fixture(autouse=True)
def override_provider():
    """Serve the in-memory dataset and clear the slowapi counter for every test."""
    app.dependency_overrides[get_data_provider] = lambda: StaticBlogDataProvider(_DATASET)
    app.state.limiter._storage.reset()
    yield
    app.dependency_overrides.clear()


class TestHealth:
    def test_root(self):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "site": config.SITE_URL}


class TestBlogRoutes:
    def test_list_articles(self):
        resp = client.get("/blog")
        assert resp.status_code == 200
        assert [a["slug"] for a in resp.json()] == ["best-cat-feeder", "dog-fountain"]

    def test_get_article(self):
        resp = client.get("/blog/Best-Cat-Feeder")
        assert resp.status_code == 200
        data = resp.json()
        assert data["slug"] == "best-cat-feeder"
        assert '<a href="/about" class="internal-link">About Us</a>' in data["html"]
        assert "Top Pick*" in data["html"]
        assert '<h2 class="blog-heading">Why a timer?</h2>' in data["html"]
        assert "alert" not in data["html"]
        types = [schema["@type"] for schema in data["structured_data"]]
        assert types == ["BlogPosting", "FAQPage", "Product", "BreadcrumbList"]
        assert data["structured_data"][2]["offers"]["price"] == "0"
        assert data["metadata"]["title"] == "Best Cat Feeder (Tested)"

    def test_article_without_affiliate_or_faq(self):
        data = client.get("/blog/dog-fountain").json()
        types = [schema["@type"] for schema in data["structured_data"]]
        assert types == ["BlogPosting", "BreadcrumbList"]

    def test_missing_article_is_404(self):
        resp = client.get("/blog/does-not-exist")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Article not found."}

    def test_content_failure_keeps_page(self, monkeypatch):
        def _boom(html):
            raise RuntimeError("sanitizer exploded")

        monkeypatch.setattr("petgadget.services.renderer.sanitize", _boom)
        resp = client.get("/blog/best-cat-feeder")
        assert resp.status_code == 200
        data = resp.json()
        assert data["html"] == CONTENT_ERROR_HTML
        assert data["structured_data"][0]["@type"] == "BlogPosting"


class TestArticlePage:
    def test_full_page(self):
        resp = client.get("/blog/best-cat-feeder/page")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        body = resp.text
        assert "<title>Best Cat Feeder (Tested)</title>" in body
        assert body.count('type="application/ld+json"') == 4
        assert "View on Amazon" in body
        assert "(Disclosure: Affiliate link)" in body
        assert "<script>alert" not in body

    def test_json_ld_payload_is_parseable(self):
        body = client.get("/blog/dog-fountain/page").text
        start = body.index('<script type="application/ld+json">') + len(
            '<script type="application/ld+json">'
        )
        payload = body[start: body.index("</script>", start)]
        assert json.loads(payload)["@type"] == "BlogPosting"
        assert "View on Amazon" not in body

    def test_missing_page_is_404(self):
        assert client.get("/blog/nope/page").status_code == 404


class TestSearchRoutes:
    def test_redirect(self):
        resp = client.get("/search/go", params={"q": "  smart app "}, follow_redirects=False)
        assert resp.status_code == 303
        assert resp.headers["location"] == "/search?q=smart%20app"

    def test_redirect_rejects_blank_query(self):
        resp = client.get("/search/go", params={"q": "   "}, follow_redirects=False)
        assert resp.status_code == 400

    def test_search_results(self):
        resp = client.get("/search", params={"q": "cat feeder"})
        assert resp.status_code == 200
        assert [a["slug"] for a in resp.json()["results"]] == ["best-cat-feeder"]

    def test_search_by_path_term(self):
        resp = client.get("/search/fountain")
        assert [a["slug"] for a in resp.json()["results"]] == ["dog-fountain"]


class TestCatalogRoutes:
    def test_features(self):
        resp = client.get("/catalog/features")
        assert resp.status_code == 200
        data = resp.json()
        assert [f["heading"] for f in data] == ["Portion Control", "Smart App", "Timers", "Two-Way Audio"]
        assert data[1]["path"] == "/search/smart%20app"
        assert "imgSrc" in data[0]

    def test_experts(self):
        data = client.get("/catalog/experts").json()
        assert [p["name"] for p in data] == ["PETLIBRO", "IMIPAW", "VOLUAS", "oneisall"]
        assert data[0]["productLink"] == "https://www.amazon.com/dp/B0B1TMLL3F"
