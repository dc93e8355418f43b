"""Text-level decorations applied to article HTML before sanitizing."""

import re

TOP_PICK_PHRASE = "Pet Gadget Insider's Top Pick"
HEADING_CLASS = "blog-heading"

_TOP_PICK_RE = re.compile(re.escape(TOP_PICK_PHRASE))

_H2_OPEN_RE = re.compile(r"<h2(\s+[^>]*)?>", re.IGNORECASE)

# One attribute per match; quoted values are consumed whole so text such as
# title="class=x" is never read as an attribute name.
_ATTR_RE = re.compile(r"(\s+)([^\s\"'=<>/]+)(?:\s*=\s*(\"[^\"]*\"|'[^']*'|[^\s\"'>]+))?")


def mark_top_picks(html: str) -> str:
    """Append ``*`` to every literal occurrence of the Top Pick phrase.

    The match is textual, so occurrences inside attribute values or link
    text are marked as well.
    """
    return _TOP_PICK_RE.sub(TOP_PICK_PHRASE + "*", html)


def _add_class(attrs: str) -> str:
    for match in _ATTR_RE.finditer(attrs):
        if match.group(2).lower() != "class":
            continue
        raw = match.group(3) or ""
        existing = raw[1:-1] if raw[:1] in ("'", '"') else raw
        tokens = existing.split()
        if HEADING_CLASS not in tokens:
            tokens.append(HEADING_CLASS)
        merged = f'{match.group(1)}{match.group(2)}="{" ".join(tokens)}"'
        return attrs[: match.start()] + merged + attrs[match.end():]
    return f'{attrs} class="{HEADING_CLASS}"'


def decorate_headings(html: str) -> str:
    """Add the ``blog-heading`` class token to every ``<h2>`` opening tag."""

    def _replace(match: "re.Match[str]") -> str:
        return f"<h2{_add_class(match.group(1) or '')}>"

    return _H2_OPEN_RE.sub(_replace, html)
