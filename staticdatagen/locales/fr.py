"""French labels."""

from __future__ import annotations

TRANSLATIONS: dict[str, str] = {
    "nav_label": "Navigation principale",
    "nav_link_title": "Lien de navigation vers la page {title}",
    "nav_submenu_label": "Sous-menu {title}",
    "tags_group_label": "Groupe de mots-clés",
    "tags_featured": "Mots-clés en vedette",
    "tags_heading_label": "Mot-clé : {tag}, {count} articles",
    "tags_posts": "articles",
    "tags_visit_page": "Visiter la page « {title} »",
    "tags_homepage": "Ceci est notre page d'accueil.",
    "tags_learn_more": "En savoir plus sur cette page.",
}
