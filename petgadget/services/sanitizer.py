import re
from typing import Dict, FrozenSet
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PreformattedString
from bs4.formatter import HTMLFormatter

# Conservative default tag list: block, inline, list and table markup only.
DEFAULT_ALLOWED_TAGS = frozenset(
    {
        "address", "article", "aside", "footer", "header",
        "h1", "h2", "h3", "h4", "h5", "h6", "hgroup", "main", "nav", "section",
        "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure", "hr",
        "li", "ol", "p", "pre", "ul",
        "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn",
        "em", "i", "kbd", "mark", "q", "rb", "rp", "rt", "rtc", "ruby", "s",
        "samp", "small", "span", "strong", "sub", "sup", "time", "u", "var", "wbr",
        "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th",
        "thead", "tr",
    }
)

# Inline vector graphics used by comparison charts in review articles
_SVG_TAGS = {"svg", "path", "line", "rect", "circle", "g", "text", "tspan"}

ALLOWED_TAGS: FrozenSet[str] = DEFAULT_ALLOWED_TAGS | {"img", "iframe"} | _SVG_TAGS

_TABLE_ATTRS = ("class", "style", "border")
_PAINT_ATTRS = ("fill", "stroke", "stroke-width", "class", "style")

ALLOWED_ATTRIBUTES: Dict[str, FrozenSet[str]] = {
    tag: frozenset(attrs)
    for tag, attrs in {
        "a": ("href", "name", "target", "class", "rel"),
        "img": ("src", "alt", "width", "height", "class", "style"),
        "iframe": ("src", "width", "height", "frameborder", "allowfullscreen"),
        "div": ("class", "style"),
        "span": ("class", "style"),
        "h2": ("class", "style"),
        "table": _TABLE_ATTRS,
        "thead": _TABLE_ATTRS,
        "tbody": _TABLE_ATTRS,
        "tr": _TABLE_ATTRS,
        "th": _TABLE_ATTRS,
        "td": _TABLE_ATTRS,
        # html.parser lowercases attribute names, hence "viewbox"
        "svg": ("width", "height", "viewbox", "xmlns", "class", "style"),
        "path": ("d",) + _PAINT_ATTRS,
        "line": ("x1", "y1", "x2", "y2", "stroke", "stroke-width", "class", "style"),
        "rect": ("x", "y", "width", "height", "rx", "ry") + _PAINT_ATTRS,
        "circle": ("cx", "cy", "r") + _PAINT_ATTRS,
        "g": ("transform", "class", "style"),
        "text": ("x", "y", "text-anchor", "class", "style"),
        "tspan": ("x", "y", "dx", "dy", "class", "style"),
    }.items()
}

# Disallowed tags are unwrapped (text kept) except these, whose content goes too
_NON_TEXT_TAGS = {"script", "style", "textarea", "option", "noscript"}

ALLOWED_SCHEMES = {"http", "https", "ftp", "mailto", "tel"}
_URL_ATTRS = {"href", "src", "cite"}

ALLOWED_IFRAME_HOSTNAMES = {"www.youtube.com", "player.vimeo.com"}

EXTERNAL_LINK_REL = "noopener noreferrer nofollow"
EXTERNAL_LINK_TARGET = "_blank"

_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9.\-+]*):")
_URL_NOISE_RE = re.compile(r"[\x00-\x20]+")


def _is_allowed_url(value: str) -> bool:
    """Return True for relative URLs and absolute URLs with an allowed scheme."""
    compact = _URL_NOISE_RE.sub("", value)
    if compact.startswith("//"):
        return True
    match = _SCHEME_RE.match(compact)
    if match is None:
        return True
    return match.group(1).lower() in ALLOWED_SCHEMES


def _is_allowed_iframe_src(value: str) -> bool:
    compact = _URL_NOISE_RE.sub("", value)
    # browsers treat a backslash as "/", so urlparse would see a different host
    if "\\" in compact:
        return False
    parsed = urlparse(compact)
    if parsed.scheme not in ("", "http", "https") or "@" in parsed.netloc:
        return False
    return parsed.hostname in ALLOWED_IFRAME_HOSTNAMES


class _SourceOrderFormatter(HTMLFormatter):
    """Minimal entity substitution, attributes kept in document order."""

    def attributes(self, tag: Tag):
        return list(tag.attrs.items())


_FORMATTER = _SourceOrderFormatter(entity_substitution=EntitySubstitution.substitute_xml)


def _mark_external_link(tag: Tag) -> None:
    href = tag.get("href")
    if isinstance(href, str) and href.startswith("http"):
        tag["rel"] = EXTERNAL_LINK_REL
        tag["target"] = EXTERNAL_LINK_TARGET


def _filter_attributes(tag: Tag) -> None:
    allowed = ALLOWED_ATTRIBUTES.get(tag.name, frozenset())
    for attr in list(tag.attrs):
        if attr not in allowed:
            del tag[attr]
            continue
        value = tag[attr]
        if attr not in _URL_ATTRS or not isinstance(value, str):
            continue
        if not _is_allowed_url(value):
            del tag[attr]
        elif tag.name == "iframe" and attr == "src" and not _is_allowed_iframe_src(value):
            del tag[attr]


def sanitize(html: str) -> str:
    """Return *html* reduced to the allow-listed tags and attributes.

    Anything not enumerated in :data:`ALLOWED_TAGS` / :data:`ALLOWED_ATTRIBUTES`
    is dropped rather than escaped.  External ``<a href="http…">`` links gain
    ``rel="noopener noreferrer nofollow"`` and ``target="_blank"``.
    """
    soup = BeautifulSoup(html, "html.parser")

    # Comments, doctypes, CDATA and processing instructions never survive
    for node in soup.find_all(string=lambda text: isinstance(text, PreformattedString)):
        node.extract()

    for tag in soup.find_all(True):
        if tag.decomposed:
            continue
        if tag.name in _NON_TEXT_TAGS:
            tag.decompose()
            continue
        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue
        if tag.name == "a":
            _mark_external_link(tag)
        _filter_attributes(tag)

    return soup.decode(formatter=_FORMATTER)
