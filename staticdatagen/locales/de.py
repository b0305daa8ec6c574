"""German labels."""

from __future__ import annotations

TRANSLATIONS: dict[str, str] = {
    "nav_label": "Hauptnavigation",
    "nav_link_title": "Navigationslink zur Seite {title}",
    "nav_submenu_label": "Untermenü {title}",
    "tags_group_label": "Schlagwortgruppe",
    "tags_featured": "Ausgewählte Schlagwörter",
    "tags_heading_label": "Schlagwort: {tag}, {count} Beiträge",
    "tags_posts": "Beiträge",
    "tags_visit_page": "Die Seite „{title}“ besuchen",
    "tags_homepage": "Dies ist unsere Startseite.",
    "tags_learn_more": "Mehr auf dieser Seite erfahren.",
}
