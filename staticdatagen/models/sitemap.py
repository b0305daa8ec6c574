"""Standard and Google News sitemap records."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import InvalidValueError, StructuralError
from staticdatagen.core.metadata import Metadata, lookup, require, split_list
from staticdatagen.core.validators import (
    validate_date,
    validate_language_code,
    validate_text_length,
    validate_url,
)
from staticdatagen.models.config import SiteDefaults

CHANGE_FREQUENCIES: frozenset[str] = frozenset(
    {"always", "hourly", "daily", "weekly", "monthly", "yearly", "never"}
)

# Decimal text between 0.0 and 1.0, kept as written in the output.
_PRIORITY = re.compile(r"0(?:\.[0-9]+)?|1(?:\.0+)?")

# Google News accepts only these genre labels.
NEWS_GENRES: frozenset[str] = frozenset(
    {"PressRelease", "Satire", "Blog", "OpEd", "Opinion", "UserGenerated"}
)
MAX_NEWS_KEYWORDS = 10
MAX_NEWS_TEXT_LENGTH = 1000
MAX_SITEMAP_URLS = 50_000


class SitemapEntry(BaseModel):
    """One ``<url>`` of a standard sitemap."""

    model_config = ConfigDict(frozen=True)

    loc: str
    lastmod: str = ""
    changefreq: str = ""
    priority: str = ""

    @classmethod
    def from_metadata(
        cls, metadata: Metadata, defaults: SiteDefaults | None = None
    ) -> SitemapEntry:
        """``loc`` (or ``permalink``) is required; a relative value is joined onto the base URL."""
        defaults = defaults or SiteDefaults()
        loc = require(metadata, "loc", "permalink")
        if defaults.base_url and "://" not in loc:
            loc = defaults.url_for(loc)
        return cls(
            loc=loc,
            lastmod=lookup(metadata, "lastmod", "last_modified"),
            changefreq=lookup(metadata, "changefreq").lower(),
            priority=lookup(metadata, "priority"),
        )

    def validate(self) -> None:
        validate_url(self.loc, "loc")
        if self.lastmod:
            validate_date(self.lastmod, "lastmod", allow_date_only=True)
        if self.changefreq and self.changefreq not in CHANGE_FREQUENCIES:
            raise InvalidValueError(
                "changefreq", self.changefreq, "not a sitemap change frequency"
            )
        if self.priority and not _PRIORITY.fullmatch(self.priority):
            raise InvalidValueError(
                "priority", self.priority, "must be a decimal within 0.0-1.0"
            )


class Sitemap(BaseModel):
    """An ordered collection of sitemap entries."""

    model_config = ConfigDict(frozen=True)

    entries: list[SitemapEntry] = []

    def validate(self) -> None:
        if len(self.entries) > MAX_SITEMAP_URLS:
            raise StructuralError(
                f"Sitemap holds {len(self.entries)} URLs; the protocol limit is {MAX_SITEMAP_URLS}",
                field="entries",
            )
        for entry in self.entries:
            entry.validate()


class NewsSitemapEntry(BaseModel):
    """One article of a Google News sitemap."""

    model_config = ConfigDict(frozen=True)

    loc: str
    publication_name: str
    publication_language: str
    publication_date: str
    title: str
    keywords: list[str] = []
    genres: list[str] = []
    image_loc: str = ""

    @classmethod
    def from_metadata(
        cls, metadata: Metadata, defaults: SiteDefaults | None = None
    ) -> NewsSitemapEntry:
        """Read the ``news_*`` keys; the language falls back to the site language."""
        defaults = defaults or SiteDefaults()
        return cls(
            loc=require(metadata, "news_loc"),
            publication_name=require(metadata, "news_publication_name"),
            publication_language=lookup(
                metadata, "news_language", default=defaults.language
            ),
            publication_date=require(metadata, "news_publication_date"),
            title=require(metadata, "news_title"),
            keywords=split_list(lookup(metadata, "news_keywords")),
            genres=split_list(lookup(metadata, "news_genres")),
            image_loc=lookup(metadata, "news_image_loc"),
        )

    def validate(self) -> None:
        validate_url(self.loc, "news_loc")
        validate_text_length(
            self.publication_name, MAX_NEWS_TEXT_LENGTH, "news_publication_name"
        )
        validate_language_code(self.publication_language, "news_language")
        validate_date(self.publication_date, "news_publication_date")
        validate_text_length(self.title, MAX_NEWS_TEXT_LENGTH, "news_title")
        if len(self.keywords) > MAX_NEWS_KEYWORDS:
            raise InvalidValueError(
                "news_keywords",
                self.keywords,
                f"at most {MAX_NEWS_KEYWORDS} keywords are allowed",
                kind="length",
            )
        for genre in self.genres:
            if genre not in NEWS_GENRES:
                raise InvalidValueError("news_genres", genre, "not a Google News genre")
        if self.image_loc:
            validate_url(self.image_loc, "news_image_loc")


class NewsSitemap(BaseModel):
    """An ordered collection of news sitemap entries."""

    model_config = ConfigDict(frozen=True)

    entries: list[NewsSitemapEntry] = []

    def validate(self) -> None:
        for entry in self.entries:
            entry.validate()
