"""Resolve ``<InternalLink id="…"/>`` placeholders into anchors."""

import logging
import re
from typing import Mapping

from petgadget.models.article import InternalLink

logger = logging.getLogger(__name__)

# <InternalLink id="x"/>, id='x', id=x; the closing slash is optional.
# Quoted ids may contain "/", bare ids stop at it.
_PLACEHOLDER_RE = re.compile(
    r"<InternalLink\s+id=(?:\"([^\"]+)\"|'([^']+)'|([^\"'\s/>]+))\s*/?>",
    re.IGNORECASE,
)

INTERNAL_LINK_CLASS = "internal-link"
BROKEN_LINK_CLASS = "broken-link"


def resolve_internal_links(html: str, link_table: Mapping[str, InternalLink]) -> str:
    """Replace every placeholder in *html* using *link_table* (keyed by lowercased id).

    Unknown ids are rendered as a visible ``broken-link`` span that carries
    the id exactly as authored.
    """

    def _replace(match: "re.Match[str]") -> str:
        link_id = next(group for group in match.groups() if group is not None)
        link = link_table.get(link_id.lower())
        if link is None:
            logger.warning("Unresolved internal link id %r", link_id)
            return f'<span class="{BROKEN_LINK_CLASS}">[Broken Link: {link_id}]</span>'
        return f'<a href="{link.url}" class="{INTERNAL_LINK_CLASS}">{link.text}</a>'

    return _PLACEHOLDER_RE.sub(_replace, html)
