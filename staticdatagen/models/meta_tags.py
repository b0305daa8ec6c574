"""``<meta>`` tag groups: primary, OpenGraph, Twitter, Apple and Microsoft."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import InvalidValueError, SecurityError
from staticdatagen.core.metadata import Metadata, lookup
from staticdatagen.core.validators import (
    sanitize_text,
    validate_twitter_handle,
    validate_url,
)
from staticdatagen.models.config import SiteDefaults

GROUP_NAMES = ("primary", "opengraph", "twitter", "apple", "microsoft")

# (front-matter keys, rendered tag name), per group.
_PRIMARY_KEYS = (
    (("author",), "author"),
    (("description",), "description"),
    (("keywords",), "keywords"),
    (("generator",), "generator"),
    (("robots",), "robots"),
    (("viewport",), "viewport"),
    (("theme-color", "theme_color"), "theme-color"),
)
_OPENGRAPH_KEYS = (
    (("og_title", "title"), "og:title"),
    (("og_description", "description"), "og:description"),
    (("og_url", "permalink"), "og:url"),
    (("og_image",), "og:image"),
    (("og_type",), "og:type"),
    (("og_site_name",), "og:site_name"),
    (("og_locale",), "og:locale"),
)
_TWITTER_KEYS = (
    (("twitter_card",), "twitter:card"),
    (("twitter_site",), "twitter:site"),
    (("twitter_creator",), "twitter:creator"),
    (("twitter_title", "title"), "twitter:title"),
    (("twitter_description", "description"), "twitter:description"),
    (("twitter_image",), "twitter:image"),
)
_APPLE_KEYS = (
    (("apple_mobile_web_app_capable",), "apple-mobile-web-app-capable"),
    (("apple_mobile_web_app_status_bar_style",), "apple-mobile-web-app-status-bar-style"),
    (("apple_mobile_web_app_title",), "apple-mobile-web-app-title"),
)
_MICROSOFT_KEYS = (
    (("msapplication_tile_color",), "msapplication-TileColor"),
    (("msapplication_tile_image",), "msapplication-TileImage"),
    (("msapplication_config",), "msapplication-config"),
)

_URL_TAGS = frozenset({"og:url", "og:image", "twitter:image"})
_HANDLE_TAGS = frozenset({"twitter:site", "twitter:creator"})


class MetaTag(BaseModel):
    """A single ``<meta>`` element.

    ``attribute`` is ``name`` for most tags and ``property`` for OpenGraph.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    content: str = ""
    attribute: str = "name"

    def validate(self) -> None:
        if not self.name.strip():
            raise InvalidValueError("name", self.name, "meta tag name cannot be empty")
        if self.attribute not in ("name", "property"):
            raise InvalidValueError("attribute", self.attribute, "must be 'name' or 'property'")
        if sanitize_text(self.content) != self.content:
            raise SecurityError(
                f"Meta tag {self.name!r} carries control characters",
                field=self.name,
                value=self.content,
            )
        if not self.content:
            return
        if self.name in _URL_TAGS:
            validate_url(self.content, self.name)
        elif self.name in _HANDLE_TAGS:
            validate_twitter_handle(self.content, self.name)


def _group(
    metadata: Metadata,
    keys: tuple[tuple[tuple[str, ...], str], ...],
    attribute: str = "name",
) -> list[MetaTag]:
    return [
        MetaTag(name=name, content=lookup(metadata, *aliases), attribute=attribute)
        for aliases, name in keys
    ]


class MetaTagGroups(BaseModel):
    """All meta tag groups of one page."""

    model_config = ConfigDict(frozen=True)

    primary: list[MetaTag] = []
    opengraph: list[MetaTag] = []
    twitter: list[MetaTag] = []
    apple: list[MetaTag] = []
    microsoft: list[MetaTag] = []

    @classmethod
    def from_metadata(
        cls, metadata: Metadata, defaults: SiteDefaults | None = None
    ) -> MetaTagGroups:
        """Build every group from front matter.

        Recognised keys with no value produce empty-content tags, which the
        generator skips.  ``og:locale`` falls back to the site language.
        """
        defaults = defaults or SiteDefaults()
        opengraph = _group(metadata, _OPENGRAPH_KEYS, attribute="property")
        opengraph = [
            tag.model_copy(update={"content": defaults.language})
            if tag.name == "og:locale" and not tag.content
            else tag
            for tag in opengraph
        ]
        return cls(
            primary=_group(metadata, _PRIMARY_KEYS),
            opengraph=opengraph,
            twitter=_group(metadata, _TWITTER_KEYS),
            apple=_group(metadata, _APPLE_KEYS),
            microsoft=_group(metadata, _MICROSOFT_KEYS),
        )

    def groups(self) -> dict[str, list[MetaTag]]:
        """Named groups in rendering order."""
        return {name: getattr(self, name) for name in GROUP_NAMES}

    def validate(self) -> None:
        for tags in self.groups().values():
            for tag in tags:
                tag.validate()
