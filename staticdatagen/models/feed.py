"""RSS 2.0 feed records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import MissingFieldError
from staticdatagen.core.metadata import Metadata, lookup, require
from staticdatagen.core.validators import (
    parse_feed_date,
    validate_language_code,
    validate_text_length,
    validate_url,
    validate_whole_number,
)
from staticdatagen.models.config import SiteDefaults

DEFAULT_GENERATOR = "staticdatagen"
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 4000


class FeedItem(BaseModel):
    """One ``<item>`` of a channel."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    description: str = ""
    guid: str = ""
    pub_date: str = ""
    author: str = ""

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> FeedItem:
        """Read the ``item_*`` keys; ``item_title`` falls back to ``title``."""
        return cls(
            title=lookup(metadata, "item_title", "title"),
            link=lookup(metadata, "item_link", "permalink"),
            description=lookup(metadata, "item_description", "description"),
            guid=lookup(metadata, "item_guid"),
            pub_date=lookup(metadata, "item_pub_date", "pub_date"),
            author=lookup(metadata, "item_author"),
        )

    def validate(self, position: int = 0) -> None:
        prefix = f"items[{position}]"
        if not self.title:
            raise MissingFieldError(f"{prefix}.title")
        validate_text_length(self.title, MAX_TITLE_LENGTH, f"{prefix}.title")
        validate_text_length(
            self.description, MAX_DESCRIPTION_LENGTH, f"{prefix}.description"
        )
        if not self.link:
            raise MissingFieldError(f"{prefix}.link")
        validate_url(self.link, f"{prefix}.link")
        if self.pub_date:
            parse_feed_date(self.pub_date, f"{prefix}.pub_date")


class FeedMetadata(BaseModel):
    """Channel-level data plus the item list of an RSS 2.0 document.

    Items are emitted in the order given; callers pre-sort (usually newest
    first).
    """

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    description: str = ""
    language: str = "en"
    pub_date: str = ""
    last_build_date: str = ""
    generator: str = DEFAULT_GENERATOR
    ttl: str = ""
    copyright: str = ""
    managing_editor: str = ""
    webmaster: str = ""
    category: str = ""
    docs: str = ""
    image_url: str = ""
    image_title: str = ""
    atom_link: str = ""
    items: list[FeedItem] = []

    @classmethod
    def from_metadata(
        cls,
        metadata: Metadata,
        defaults: SiteDefaults | None = None,
        items: list[FeedItem] | None = None,
    ) -> FeedMetadata:
        """Build a channel from front matter.

        ``title`` is required.  ``link`` is read from ``link`` or
        ``permalink`` and falls back to the site base URL.  When *items* is
        not given and the map carries ``item_title``, a single item is built
        from the ``item_*`` keys.
        """
        defaults = defaults or SiteDefaults()
        link = lookup(metadata, "link", "permalink", default=defaults.base_url)
        if not link:
            raise MissingFieldError("link")
        if items is None:
            items = (
                [FeedItem.from_metadata(metadata)]
                if lookup(metadata, "item_title")
                else []
            )
        return cls(
            title=require(metadata, "title"),
            link=link,
            description=lookup(metadata, "description"),
            language=lookup(metadata, "language", default=defaults.language),
            pub_date=lookup(metadata, "pub_date"),
            last_build_date=lookup(metadata, "last_build_date"),
            generator=lookup(metadata, "generator", default=DEFAULT_GENERATOR),
            ttl=lookup(metadata, "ttl"),
            copyright=lookup(metadata, "copyright"),
            managing_editor=lookup(metadata, "managing_editor"),
            webmaster=lookup(metadata, "webmaster"),
            category=lookup(metadata, "category"),
            docs=lookup(metadata, "docs"),
            image_url=lookup(metadata, "image_url"),
            image_title=lookup(metadata, "image_title"),
            atom_link=lookup(metadata, "atom_link"),
            items=items,
        )

    def validate(self) -> None:
        if not self.title:
            raise MissingFieldError("title")
        validate_text_length(self.title, MAX_TITLE_LENGTH, "title")
        validate_text_length(self.description, MAX_DESCRIPTION_LENGTH, "description")
        validate_url(self.link, "link")
        validate_language_code(self.language, "language")
        if self.pub_date:
            parse_feed_date(self.pub_date, "pub_date")
        if self.last_build_date:
            parse_feed_date(self.last_build_date, "last_build_date")
        if self.ttl:
            validate_whole_number(self.ttl, "ttl")
        for key in ("docs", "image_url", "atom_link"):
            value = getattr(self, key)
            if value:
                validate_url(value, key)
        if self.image_url and not self.image_title:
            raise MissingFieldError("image_title", "image_url requires image_title")
        for position, item in enumerate(self.items):
            item.validate(position)
