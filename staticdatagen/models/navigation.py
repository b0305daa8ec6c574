"""Navigation menu records."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import DataError, InvalidValueError, MissingFieldError, StructuralError
from staticdatagen.core.validators import sanitize_path, sanitize_text, validate_url
from staticdatagen.models.page import FileRecord

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({"md", "toml", "json"})
EXCLUDED_STEMS = frozenset({"index", "404", "privacy", "terms", "offline"})
MAX_LABEL_LENGTH = 64

_WORD_SEPARATORS = "-_."


def check_depth_transition(previous: int | None, depth: int, position: int) -> None:
    """Raise ``StructuralError`` for an illegal depth step.

    The first item must sit at depth 0; each later item may go at most one
    level deeper than its predecessor, and may close any number of levels.
    """
    if depth < 0:
        raise StructuralError(
            f"Item {position} has negative depth {depth}", field="depth", value=depth
        )
    if previous is None:
        if depth != 0:
            raise StructuralError(
                f"Navigation must start at depth 0, got {depth}", field="depth", value=depth
            )
        return
    if depth > previous + 1:
        raise StructuralError(
            f"Item {position} jumps from depth {previous} to {depth}",
            field="depth",
            value=depth,
        )


def title_case_label(stem: str) -> str:
    """``getting-started_guide`` -> ``Getting Started Guide`` (64 chars max, then ``…``)."""
    cleaned = stem.replace("<", "").replace(">", "")
    for separator in _WORD_SEPARATORS:
        cleaned = cleaned.replace(separator, " ")
    label = " ".join(word[:1].upper() + word[1:].lower() for word in cleaned.split())
    if len(label) > MAX_LABEL_LENGTH:
        label = label[:MAX_LABEL_LENGTH] + "…"
    return label


class NavItem(BaseModel):
    """One (title, permalink, depth) entry of a flat navigation sequence."""

    model_config = ConfigDict(frozen=True)

    title: str
    permalink: str
    depth: int = 0

    def validate(self, position: int = 0) -> None:
        if not self.title.strip():
            raise MissingFieldError(f"items[{position}].title")
        if not self.permalink:
            raise MissingFieldError(f"items[{position}].permalink")
        if "://" in self.permalink:
            validate_url(self.permalink, f"items[{position}].permalink")
        elif self.permalink != "/":
            sanitize_path(self.permalink.lstrip("/"), f"items[{position}].permalink")
        if sanitize_text(self.title) != self.title:
            raise InvalidValueError(
                f"items[{position}].title", self.title, "contains control characters"
            )


class Navigation(BaseModel):
    """An ordered, flat navigation sequence; depth encodes nesting."""

    model_config = ConfigDict(frozen=True)

    items: list[NavItem] = []

    @classmethod
    def from_files(cls, files: list[FileRecord]) -> Navigation:
        """Build a depth-0 menu from content files.

        Keeps ``.md``, ``.toml`` and ``.json`` files, skips index-like pages
        and unsafe names, and sorts by label.
        """
        entries: list[tuple[str, str]] = []
        for file in files:
            name = sanitize_text(file.name)
            try:
                clean = sanitize_path(name)
            except DataError:
                logger.warning("Skipping unsafe navigation entry %r", file.name)
                continue
            record = FileRecord.create(clean)
            if record.extension not in SUPPORTED_EXTENSIONS:
                continue
            if record.stem in EXCLUDED_STEMS:
                continue
            label = title_case_label(record.stem)
            if not label:
                continue
            path = clean.rsplit(".", 1)[0]
            entries.append((label, f"/{path}/index.html"))
        entries.sort(key=lambda entry: entry[0])
        return cls(items=[NavItem(title=t, permalink=p) for t, p in entries])

    def validate(self) -> None:
        previous: int | None = None
        for position, item in enumerate(self.items):
            item.validate(position)
            check_depth_transition(previous, item.depth, position)
            previous = item.depth


def navigation_from_files(files: list[FileRecord]) -> Navigation:
    return Navigation.from_files(files)
