"""Accessible navigation menu generator.

Turns a flat ``(title, permalink, depth)`` sequence into nested lists:

* a depth increase opens a child ``<ul>`` inside the previous ``<li>``;
* a depth decrease closes lists back to that level;
* a jump of more than one level is a ``StructuralError``.
"""

from __future__ import annotations

from staticdatagen.generators._markup import escape_attr, escape_html
from staticdatagen.locales import Translator
from staticdatagen.models.navigation import NavItem, Navigation, check_depth_transition

ROOT_LIST_CLASS = "navbar-nav ms-auto mb-2 mb-lg-0"
CHILD_LIST_CLASS = "nav-submenu"
LINK_CLASS = "text-uppercase p-2"


def _render_link(item: NavItem, translator: Translator) -> str:
    title = escape_attr(item.title)
    return (
        f'<li class="nav-item" role="none">'
        f'<a aria-label="{title}" href="{escape_attr(item.permalink)}" '
        f'title="{escape_attr(translator.translate("nav_link_title", title=item.title))}" '
        f'class="{LINK_CLASS}" role="menuitem">{escape_html(item.title)}</a>'
    )


def generate_navigation(navigation: Navigation, translator: Translator | None = None) -> str:
    """Render *navigation* as a ``<nav>`` fragment.

    Returns an empty string for an empty menu.
    """
    if not navigation.items:
        return ""
    translator = translator or Translator()

    parts = [
        f'<nav aria-label="{escape_attr(translator.translate("nav_label"))}">',
        f'<ul class="{ROOT_LIST_CLASS}" role="menubar">',
    ]
    previous: NavItem | None = None
    for position, item in enumerate(navigation.items):
        check_depth_transition(
            previous.depth if previous else None, item.depth, position
        )
        if previous is not None:
            if item.depth > previous.depth:
                label = translator.translate("nav_submenu_label", title=previous.title)
                parts.append(
                    f'<ul class="{CHILD_LIST_CLASS}" role="menu" aria-label="{escape_attr(label)}">'
                )
            else:
                parts.append("</li>")
                parts.extend(["</ul>", "</li>"] * (previous.depth - item.depth))
        parts.append(_render_link(item, translator))
        previous = item

    parts.append("</li>")
    parts.extend(["</ul>", "</li>"] * previous.depth)
    parts.extend(["</ul>", "</nav>"])
    return "\n".join(parts)
