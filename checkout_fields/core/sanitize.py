"""Sanitisation and coercion of raw submitted form values."""

import re

from django.utils.html import strip_tags

FALSY_VALUES = frozenset({"", "0", "no", "false", "off"})

_WHITESPACE_RE = re.compile(r"\s+")
_INLINE_WHITESPACE_RE = re.compile(r"[^\S\n]+")


def is_truthy(value) -> bool:
    """Coerce a submitted boolean-ish value.

    None, "", "0", "no", "false" and "off" (any case) are false; every other
    value is true.
    """
    if value is None or value is False:
        return False
    if value is True:
        return True
    return str(value).strip().lower() not in FALSY_VALUES


def sanitize_text_field(value) -> str:
    """Strip tags, collapse all whitespace and trim a single-line value."""
    if value is None:
        return ""
    value = strip_tags(str(value))
    return _WHITESPACE_RE.sub(" ", value).strip()


def sanitize_textarea_field(value) -> str:
    """Like sanitize_text_field but keep line breaks."""
    if value is None:
        return ""
    value = strip_tags(str(value)).replace("\r\n", "\n").replace("\r", "\n")
    lines = [_INLINE_WHITESPACE_RE.sub(" ", line).strip() for line in value.split("\n")]
    return "\n".join(lines).strip()
