"""Tag index records and the per-page tag extraction that feeds them."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import InvalidValueError, StructuralError
from staticdatagen.core.metadata import Metadata, lookup, split_list
from staticdatagen.models.page import FileRecord

logger = logging.getLogger(__name__)

# Tags that name site furniture rather than content.
RESERVED_TAGS: frozenset[str] = frozenset(
    {
        "404", "offline", "thanks", "archive", "tag", "author", "category",
        "search", "login", "account", "profile", "unpublished", "private",
        "test", "navigation", "sidebar", "footer", "cart", "checkout", "order",
    }
)


def sanitize_tag(tag: str) -> str:
    """Keep only the alphanumeric characters of *tag*."""
    return "".join(ch for ch in tag if ch.isalnum())


def extract_page_tags(file: FileRecord, metadata: Metadata) -> list[str]:
    """Return the tags *file* should be filed under.

    A tag from the comma-separated ``tags`` key counts only when its
    sanitized form also appears in the file body.  Reserved names are skipped.
    """
    matched: list[str] = []
    for raw in split_list(lookup(metadata, "tags")):
        tag = sanitize_tag(raw)
        if not tag or tag.lower() in RESERVED_TAGS:
            continue
        if tag in file.content and tag not in matched:
            matched.append(tag)
    return matched


class TagPages(BaseModel):
    """Pages carrying one tag, as parallel sequences.

    Position ``i`` of every sequence describes the same page.
    """

    model_config = ConfigDict(frozen=True)

    titles: list[str] = []
    dates: list[str] = []
    permalinks: list[str] = []
    descriptions: list[str] = []

    def __len__(self) -> int:
        return len(self.titles)

    def check_alignment(self, tag: str = "") -> None:
        """Raise ``StructuralError`` unless all sequences have one length."""
        lengths = {
            "titles": len(self.titles),
            "dates": len(self.dates),
            "permalinks": len(self.permalinks),
            "descriptions": len(self.descriptions),
        }
        if len(set(lengths.values())) != 1:
            raise StructuralError(
                f"Tag {tag!r} has mismatched sequence lengths: {lengths}",
                field=tag,
                value=lengths,
            )

    def rows(self) -> list[tuple[str, str, str, str]]:
        """Zip the sequences positionally as (title, date, permalink, description)."""
        self.check_alignment()
        return list(zip(self.titles, self.dates, self.permalinks, self.descriptions))


class TagIndex(BaseModel):
    """Tag name -> pages carrying it."""

    model_config = ConfigDict(frozen=True)

    tags: dict[str, TagPages] = {}

    @property
    def total_pages(self) -> int:
        return sum(len(pages) for pages in self.tags.values())

    def validate(self) -> None:
        for tag, pages in self.tags.items():
            if not tag.strip():
                raise InvalidValueError("tags", tag, "tag name cannot be empty")
            pages.check_alignment(tag)


class TagIndexBuilder:
    """Accumulates tagged pages across a build pass into a ``TagIndex``."""

    def __init__(self) -> None:
        self._rows: dict[str, list[tuple[str, str, str, str]]] = {}

    def add_page(self, file: FileRecord, metadata: Metadata) -> list[str]:
        """File one page under each matching tag; returns the tags used."""
        tags = extract_page_tags(file, metadata)
        row = (
            lookup(metadata, "title"),
            lookup(metadata, "date"),
            lookup(metadata, "permalink"),
            lookup(metadata, "description"),
        )
        for tag in tags:
            self._rows.setdefault(tag, []).append(row)
        if tags:
            logger.debug("Filed %s under tags %s", file.name, ", ".join(tags))
        return tags

    def build(self) -> TagIndex:
        """Freeze the accumulated rows into a ``TagIndex``."""
        tags: dict[str, TagPages] = {}
        for tag, rows in self._rows.items():
            titles, dates, permalinks, descriptions = (list(col) for col in zip(*rows))
            tags[tag] = TagPages(
                titles=titles,
                dates=dates,
                permalinks=permalinks,
                descriptions=descriptions,
            )
        return TagIndex(tags=tags)
