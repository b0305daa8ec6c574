"""Web app manifest (PWA) records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from staticdatagen.core.errors import InvalidValueError, MissingFieldError
from staticdatagen.core.metadata import Metadata, lookup, require, split_list
from staticdatagen.core.validators import (
    validate_color,
    validate_image_size,
    validate_text_length,
)
from staticdatagen.models.config import SiteDefaults

DEFAULT_DISPLAY = "standalone"
DEFAULT_ICON_SIZE = "512x512"
DEFAULT_ICON_TYPE = "image/svg+xml"
DEFAULT_ICON_PURPOSE = "any maskable"

DISPLAY_MODES: frozenset[str] = frozenset(
    {"fullscreen", "standalone", "minimal-ui", "browser"}
)
ORIENTATIONS: frozenset[str] = frozenset(
    {
        "any",
        "natural",
        "landscape",
        "landscape-primary",
        "landscape-secondary",
        "portrait",
        "portrait-primary",
        "portrait-secondary",
    }
)
ICON_PURPOSES: frozenset[str] = frozenset({"any", "maskable", "monochrome"})

MAX_NAME_LENGTH = 45
MAX_SHORT_NAME_LENGTH = 12
MAX_DESCRIPTION_LENGTH = 120


class ManifestIcon(BaseModel):
    """One entry of the manifest's ``icons`` array."""

    model_config = ConfigDict(frozen=True)

    src: str
    sizes: str = DEFAULT_ICON_SIZE
    icon_type: str = DEFAULT_ICON_TYPE
    purpose: str = DEFAULT_ICON_PURPOSE

    def validate(self, position: int = 0) -> None:
        prefix = f"icons[{position}]"
        if not self.src:
            raise MissingFieldError(f"{prefix}.src")
        tokens = self.sizes.split()
        if not tokens:
            raise MissingFieldError(f"{prefix}.sizes")
        for token in tokens:
            if token != "any":
                validate_image_size(token, f"{prefix}.sizes")
        for purpose in self.purpose.split():
            if purpose not in ICON_PURPOSES:
                raise InvalidValueError(f"{prefix}.purpose", purpose, "unknown icon purpose")


class ManifestRecord(BaseModel):
    """Fields of a ``manifest.json`` document.

    Optional fields left empty are omitted from the generated JSON rather
    than serialised as ``null``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    start_url: str
    short_name: str = ""
    description: str = ""
    display: str = DEFAULT_DISPLAY
    orientation: str = ""
    scope: str = ""
    background_color: str = ""
    theme_color: str = ""
    icons: list[ManifestIcon] = []

    @classmethod
    def from_metadata(
        cls, metadata: Metadata, defaults: SiteDefaults | None = None
    ) -> ManifestRecord:
        """Build from front matter; ``name`` and ``start_url`` are required.

        ``start_url`` falls back to the site base URL.  A single ``icon``
        key produces one icon, shaped by ``icon_sizes``, ``icon_type`` and
        ``icon_purpose``.
        """
        defaults = defaults or SiteDefaults()
        start_url = lookup(metadata, "start_url", default=defaults.base_url)
        if not start_url:
            raise MissingFieldError("start_url")

        icons: list[ManifestIcon] = []
        for src in split_list(lookup(metadata, "icon")):
            icons.append(
                ManifestIcon(
                    src=src,
                    sizes=lookup(metadata, "icon_sizes", default=DEFAULT_ICON_SIZE),
                    icon_type=lookup(metadata, "icon_type", default=DEFAULT_ICON_TYPE),
                    purpose=lookup(metadata, "icon_purpose", default=DEFAULT_ICON_PURPOSE),
                )
            )

        return cls(
            name=require(metadata, "name"),
            start_url=start_url,
            short_name=lookup(metadata, "short_name"),
            description=lookup(metadata, "description"),
            display=lookup(metadata, "display", default=DEFAULT_DISPLAY),
            orientation=lookup(metadata, "orientation"),
            scope=lookup(metadata, "scope"),
            background_color=lookup(metadata, "background-color", "background_color"),
            theme_color=lookup(metadata, "theme-color", "theme_color"),
            icons=icons,
        )

    def validate(self) -> None:
        if not self.name:
            raise MissingFieldError("name")
        if not self.start_url:
            raise MissingFieldError("start_url")
        validate_text_length(self.name, MAX_NAME_LENGTH, "name")
        validate_text_length(self.short_name, MAX_SHORT_NAME_LENGTH, "short_name")
        validate_text_length(self.description, MAX_DESCRIPTION_LENGTH, "description")
        if self.display not in DISPLAY_MODES:
            raise InvalidValueError("display", self.display, "unknown display mode")
        if self.orientation and self.orientation not in ORIENTATIONS:
            raise InvalidValueError("orientation", self.orientation, "unknown orientation")
        if self.background_color:
            validate_color(self.background_color, "background_color")
        if self.theme_color:
            validate_color(self.theme_color, "theme_color")
        for position, icon in enumerate(self.icons):
            icon.validate(position)
