"""Front-matter lookup helpers shared by the record factories.

Front matter arrives as a flat ``Mapping[str, str]``.  Factories only ever
read the keys they recognise through these helpers; everything else in the
map is ignored.
"""

from __future__ import annotations

from collections.abc import Mapping

from staticdatagen.core.errors import MissingFieldError
from staticdatagen.core.validators import sanitize_text

Metadata = Mapping[str, str]


def lookup(metadata: Metadata, *keys: str, default: str = "") -> str:
    """Return the first non-blank value among *keys*, stripped and sanitized.

    Several records accept aliases (``theme-color`` / ``theme_color``,
    ``loc`` / ``permalink``); the first key wins.
    """
    for key in keys:
        value = metadata.get(key)
        if value is not None and str(value).strip():
            return sanitize_text(str(value).strip())
    return default


def require(metadata: Metadata, *keys: str) -> str:
    """Like :func:`lookup` but raise ``MissingFieldError`` naming the first key."""
    value = lookup(metadata, *keys)
    if not value:
        raise MissingFieldError(keys[0])
    return value


def split_list(value: str, separator: str = ",") -> list[str]:
    """Split a delimited front-matter value, dropping blank entries."""
    return [part.strip() for part in value.split(separator) if part.strip()]
