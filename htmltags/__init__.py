from .htmltags import (
    VOID_ELEMENTS,
    HtmlTag,
    LiteralTag,
    TagList,
    TagSource,
    HtmlTagsError,
    NotFoundError,
    InvalidPathError,
    UnsupportedOperationError,
)
from .document import DEFAULT_DOCTYPE, HtmlDocument, makedocument

__all__ = [
    "VOID_ELEMENTS",
    "HtmlTag",
    "LiteralTag",
    "TagList",
    "TagSource",
    "HtmlTagsError",
    "NotFoundError",
    "InvalidPathError",
    "UnsupportedOperationError",
    "DEFAULT_DOCTYPE",
    "HtmlDocument",
    "makedocument",
]
