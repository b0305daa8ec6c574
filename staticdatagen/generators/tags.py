"""Tag index markup generator."""

from __future__ import annotations

from staticdatagen.generators._markup import escape_attr, escape_html
from staticdatagen.locales import Translator
from staticdatagen.models.tags import TagIndex


def _slug(tag: str) -> str:
    return tag.replace(" ", "-")


def generate_tag_index(index: TagIndex, translator: Translator | None = None) -> str:
    """Render the tag -> pages index as an accessible HTML fragment.

    Tags are sorted; pages keep their positional order.  Each tag's parallel
    sequences must be the same length, otherwise ``StructuralError``.
    """
    translator = translator or Translator()
    posts = translator.translate("tags_posts")
    featured = translator.translate("tags_featured")
    total = index.total_pages

    lines = [
        f'<div role="group" aria-label="{escape_attr(translator.translate("tags_group_label"))}" class="tags-wrapper">',
        f'<h2 class="featured-tags" id="h2-featured-tags" tabindex="0" '
        f'aria-label="{escape_attr(featured)}, {total}">{escape_html(featured)} ({total})</h2>',
    ]

    for tag_position, tag in enumerate(sorted(index.tags)):
        rows = index.tags[tag].rows()
        slug = escape_attr(_slug(tag))
        display = tag[:1].upper() + tag[1:]
        heading_label = translator.translate("tags_heading_label", tag=display, count=len(rows))
        lines.append('<section class="tag-group">')
        lines.append(
            f'<h3 class="{slug}" id="h3-{slug}" tabindex="0" aria-level="3" '
            f'aria-label="{escape_attr(heading_label)}">'
            f"{escape_html(display)} ({len(rows)} {escape_html(posts)})</h3>"
        )
        lines.append('<ul role="list">')
        for row_position, (title, date, permalink, description) in enumerate(rows):
            link_label = translator.translate("tags_visit_page", title=title)
            if not description:
                key = "tags_homepage" if "Home" in title else "tags_learn_more"
                description = translator.translate(key)
            lines.append(
                f'<li id="li-{slug}-{tag_position}-{row_position}" class="tagged-page-item">'
                f'<span class="tag-date">{escape_html(date)}</span>: '
                f'<a href="{escape_attr(permalink)}" aria-label="{escape_attr(link_label)}">'
                f"{escape_html(title)}</a> - <strong>{escape_html(description)}</strong></li>"
            )
        lines.append("</ul>")
        lines.append("</section>")

    lines.append("</div>")
    return "\n".join(lines) + "\n"
