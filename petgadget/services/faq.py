"""Derive a schema.org FAQPage from the ``<h2>`` sections of an article body.

Each ``<h2>`` heading is treated as a question and the text that follows it,
up to the next ``<h2>`` (or the end of the body), as the answer.  The scan
runs on the author's original HTML, not on the sanitized output.
"""

import re
from typing import Any, Dict, List, NamedTuple, Optional

_HEADING_RE = re.compile(r"<h2(?:\s[^>]*)?>(.*?)</h2\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


class FAQItem(NamedTuple):
    question: str
    answer: str


def extract_faq_items(html: str) -> List[FAQItem]:
    """Return one :class:`FAQItem` per ``<h2>`` section with a non-empty answer."""
    matches = list(_HEADING_RE.finditer(html))
    items: List[FAQItem] = []
    for index, match in enumerate(matches):
        question = _TAG_RE.sub("", match.group(1)).strip()
        end = matches[index + 1].start() if index + 1 < len(matches) else len(html)
        answer = _TAG_RE.sub(" ", html[match.end():end])
        answer = _WHITESPACE_RE.sub(" ", answer).strip()
        if answer:
            items.append(FAQItem(question, answer))
    return items


def build_faq_schema(html: str) -> Optional[Dict[str, Any]]:
    """Return the FAQPage object for *html*, or ``None`` when it has no FAQ items."""
    if not html:
        return None

    items = extract_faq_items(html)
    if not items:
        return None

    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": item.question,
                "acceptedAnswer": {"@type": "Answer", "text": item.answer},
            }
            for item in items
        ],
    }
