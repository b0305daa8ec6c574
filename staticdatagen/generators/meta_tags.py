"""``<meta>`` element block generator."""

from __future__ import annotations

from staticdatagen.generators._markup import escape_attr
from staticdatagen.models.meta_tags import MetaTag, MetaTagGroups


def render_meta_tag(tag: MetaTag) -> str:
    return f'<meta {tag.attribute}="{escape_attr(tag.name)}" content="{escape_attr(tag.content)}">'


def generate_meta_tag_groups(groups: MetaTagGroups) -> dict[str, str]:
    """Render each named group as its own block; empty-content tags are skipped."""
    return {
        name: "\n".join(render_meta_tag(tag) for tag in tags if tag.content)
        for name, tags in groups.groups().items()
    }


def generate_meta_tags(groups: MetaTagGroups) -> str:
    """Flatten every group into one newline-separated ``<meta>`` block."""
    blocks = [block for block in generate_meta_tag_groups(groups).values() if block]
    return "\n".join(blocks)
