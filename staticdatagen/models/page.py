"""Page and file records: the per-document inputs of a build pass."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import MissingFieldError
from staticdatagen.core.metadata import Metadata, lookup, require, split_list
from staticdatagen.core.validators import (
    sanitize_path,
    validate_date,
    validate_language_code,
    validate_text_length,
    validate_url,
)
from staticdatagen.models.config import SiteDefaults

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 500

# Upper bound on the body of a single content file (characters).
MAX_CONTENT_LENGTH = 10 * 1024 * 1024


class PageMetadata(BaseModel):
    """Typed view of a page's front matter."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    permalink: str
    date: str = ""
    last_modified: str = ""
    keywords: list[str] = []
    author: str = ""
    language: str = "en"

    @classmethod
    def from_metadata(
        cls, metadata: Metadata, defaults: SiteDefaults | None = None
    ) -> PageMetadata:
        """Build from front matter; ``title``, ``description`` and ``permalink`` are required."""
        defaults = defaults or SiteDefaults()
        return cls(
            title=require(metadata, "title"),
            description=require(metadata, "description"),
            permalink=require(metadata, "permalink"),
            date=lookup(metadata, "date"),
            last_modified=lookup(metadata, "last_modified"),
            keywords=split_list(lookup(metadata, "keywords")),
            author=lookup(metadata, "author"),
            language=lookup(metadata, "language", default=defaults.language),
        )

    def validate(self) -> None:
        if not self.title.strip():
            raise MissingFieldError("title")
        if not self.description.strip():
            raise MissingFieldError("description")
        validate_text_length(self.title, MAX_TITLE_LENGTH, "title")
        validate_text_length(self.description, MAX_DESCRIPTION_LENGTH, "description")
        validate_url(self.permalink, "permalink")
        if self.date:
            validate_date(self.date, "date", allow_date_only=True)
        if self.last_modified:
            validate_date(self.last_modified, "last_modified", allow_date_only=True)
        validate_language_code(self.language, "language")


class FileRecord(BaseModel):
    """A source content file as handed over by the directory reader.

    ``name`` is relative to the content directory and must survive
    :func:`sanitize_path` unchanged in meaning.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    content: str = ""
    extension: str = ""

    @classmethod
    def create(cls, name: str, content: str = "") -> FileRecord:
        """Build a record, deriving ``extension`` from the name."""
        stem = name.rsplit("/", 1)[-1]
        extension = stem.rsplit(".", 1)[-1].lower() if "." in stem else ""
        return cls(name=name, content=content, extension=extension)

    @property
    def stem(self) -> str:
        """File name without directories or extension."""
        base = self.name.replace("\\", "/").rsplit("/", 1)[-1]
        return base.rsplit(".", 1)[0] if "." in base else base

    def validate(self) -> None:
        sanitize_path(self.name, "name")
        validate_text_length(self.content, MAX_CONTENT_LENGTH, "content")
