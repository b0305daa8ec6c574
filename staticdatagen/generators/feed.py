"""RSS 2.0 ``rss.xml`` generator."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from staticdatagen.core.validators import format_rfc822
from staticdatagen.generators._markup import render_xml, sub_element
from staticdatagen.models.feed import FeedItem, FeedMetadata

ATOM_NS = "http://www.w3.org/2005/Atom"


def _render_item(channel: ET.Element, item: FeedItem) -> None:
    element = sub_element(channel, "item")
    sub_element(element, "title", item.title)
    sub_element(element, "link", item.link)
    if item.description:
        sub_element(element, "description", item.description)
    if item.guid:
        is_permalink = "true" if item.guid.startswith(("http://", "https://")) else "false"
        sub_element(element, "guid", item.guid, isPermaLink=is_permalink)
    if item.pub_date:
        sub_element(element, "pubDate", format_rfc822(item.pub_date))
    if item.author:
        sub_element(element, "author", item.author)


def generate_rss(feed: FeedMetadata) -> str:
    """Render a validated ``FeedMetadata`` as an RSS 2.0 document.

    Channel elements come first in a fixed order (``title, link,
    description, language, pubDate, lastBuildDate, generator, ttl`` and the
    optional extras), followed by the items in the order given.
    """
    attrib = {"version": "2.0"}
    if feed.atom_link:
        attrib["xmlns:atom"] = ATOM_NS
    rss = ET.Element("rss", attrib)
    channel = sub_element(rss, "channel")

    sub_element(channel, "title", feed.title)
    sub_element(channel, "link", feed.link)
    sub_element(channel, "description", feed.description)
    sub_element(channel, "language", feed.language)
    if feed.pub_date:
        sub_element(channel, "pubDate", format_rfc822(feed.pub_date))
    if feed.last_build_date:
        sub_element(channel, "lastBuildDate", format_rfc822(feed.last_build_date))
    sub_element(channel, "generator", feed.generator)
    if feed.ttl:
        sub_element(channel, "ttl", feed.ttl)

    optional = (
        ("copyright", feed.copyright),
        ("managingEditor", feed.managing_editor),
        ("webMaster", feed.webmaster),
        ("category", feed.category),
        ("docs", feed.docs),
    )
    for tag, value in optional:
        if value:
            sub_element(channel, tag, value)
    if feed.image_url:
        image = sub_element(channel, "image")
        sub_element(image, "url", feed.image_url)
        sub_element(image, "title", feed.image_title)
        sub_element(image, "link", feed.link)
    if feed.atom_link:
        sub_element(
            channel,
            "atom:link",
            href=feed.atom_link,
            rel="self",
            type="application/rss+xml",
        )

    for item in feed.items:
        _render_item(channel, item)
    return render_xml(rss)
