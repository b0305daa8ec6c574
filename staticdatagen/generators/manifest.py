"""``manifest.json`` generator."""

from __future__ import annotations

import json
from typing import Any

from staticdatagen.models.manifest import ManifestIcon, ManifestRecord

# Top-level keys in emission order; empty values are dropped.
_OPTIONAL_KEYS = (
    "short_name",
    "description",
    "start_url",
    "display",
    "orientation",
    "scope",
    "background_color",
    "theme_color",
)


def _icon_object(icon: ManifestIcon) -> dict[str, str]:
    obj = {"src": icon.src, "sizes": icon.sizes}
    if icon.icon_type:
        obj["type"] = icon.icon_type
    if icon.purpose:
        obj["purpose"] = icon.purpose
    return obj


def manifest_dict(manifest: ManifestRecord) -> dict[str, Any]:
    """Return the manifest as a plain dict with absent keys omitted.

    ``icons`` is left out entirely when there are none, never emitted as an
    empty list or ``null``.
    """
    data: dict[str, Any] = {"name": manifest.name}
    for key in _OPTIONAL_KEYS:
        value = getattr(manifest, key)
        if value:
            data[key] = value
    if manifest.icons:
        data["icons"] = [_icon_object(icon) for icon in manifest.icons]
    return data


def generate_manifest(manifest: ManifestRecord) -> str:
    """Render a validated ``ManifestRecord`` as pretty-printed JSON."""
    return json.dumps(manifest_dict(manifest), indent=2, ensure_ascii=False) + "\n"
