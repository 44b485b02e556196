"""
Output sanitization for bookmarks read back from storage.

Every transform here is idempotent: sanitizing an already sanitized record
returns it unchanged.
"""
import re
from dataclasses import replace

from bleach.sanitizer import Cleaner

from schemas.bookmark import BookmarkRecord

_ALLOWED_DESCRIPTION_TAGS = frozenset({
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "em",
    "i",
    "img",
    "li",
    "ol",
    "p",
    "pre",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "u",
    "ul",
})

# No on* handlers or style attributes anywhere
_ALLOWED_DESCRIPTION_ATTRS = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_DESCRIPTION_CLEANER = Cleaner(
    tags=_ALLOWED_DESCRIPTION_TAGS,
    attributes=_ALLOWED_DESCRIPTION_ATTRS,
    protocols=_ALLOWED_PROTOCOLS,
    strip=True,
    strip_comments=True,
)

# "&" not followed by a full `&name;`, `&#123;` or `&#x1F;` reference
_BARE_AMPERSAND = re.compile(r"&(?!#\d+;|#x[0-9a-fA-F]+;|[A-Za-z][A-Za-z0-9]*;)")


def sanitize_title(title: str) -> str:
    """
    HTML-escape a title.

    An `&` that already starts a complete entity reference is left alone, so
    escaped titles are not escaped twice and nothing is ever decoded.
    """
    escaped = _BARE_AMPERSAND.sub("&amp;", title)
    return escaped.replace("<", "&lt;").replace(">", "&gt;")


def sanitize_description(description: str) -> str:
    """Strip script-capable markup while keeping benign inline tags."""
    return _DESCRIPTION_CLEANER.clean(description)


def sanitize_bookmark(bookmark: BookmarkRecord) -> BookmarkRecord:
    """Return a copy of the record that is safe to send to a client."""
    return replace(
        bookmark,
        title=sanitize_title(bookmark.title),
        description=sanitize_description(bookmark.description),
        rating=int(bookmark.rating),
    )
