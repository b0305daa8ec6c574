"""English labels."""

from __future__ import annotations

TRANSLATIONS: dict[str, str] = {
    "nav_label": "Main navigation",
    "nav_link_title": "Navigation link for the {title} page",
    "nav_submenu_label": "{title} submenu",
    "tags_group_label": "Tag group",
    "tags_featured": "Featured Tags",
    "tags_heading_label": "Tag: {tag}, {count} Posts",
    "tags_posts": "Posts",
    "tags_visit_page": 'Visit the "{title}" page',
    "tags_homepage": "This is our homepage.",
    "tags_learn_more": "Learn more on this page.",
}
