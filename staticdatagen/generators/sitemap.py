"""``sitemap.xml`` and ``news-sitemap.xml`` generators.

Child element order is fixed to match the published schemas:

* sitemap 0.9: ``loc, lastmod, changefreq, priority``
* Google News: ``loc, news:news{news:publication{news:name, news:language},
  news:publication_date, news:title[, news:keywords][, news:genres]}``
  followed by an optional ``image:image``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from staticdatagen.generators._markup import render_xml, sub_element
from staticdatagen.models.sitemap import NewsSitemap, Sitemap

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
NEWS_NS = "http://www.google.com/schemas/sitemap-news/0.9"
IMAGE_NS = "http://www.google.com/schemas/sitemap-image/1.1"


def generate_sitemap(sitemap: Sitemap) -> str:
    """Render a validated ``Sitemap`` as sitemap 0.9 XML."""
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS})
    for entry in sitemap.entries:
        url = sub_element(urlset, "url")
        sub_element(url, "loc", entry.loc)
        if entry.lastmod:
            sub_element(url, "lastmod", entry.lastmod)
        if entry.changefreq:
            sub_element(url, "changefreq", entry.changefreq)
        if entry.priority:
            priority = entry.priority if "." in entry.priority else f"{entry.priority}.0"
            sub_element(url, "priority", priority)
    return render_xml(urlset)


def generate_news_sitemap(news: NewsSitemap) -> str:
    """Render a validated ``NewsSitemap`` as Google News sitemap XML."""
    attrib = {"xmlns": SITEMAP_NS, "xmlns:news": NEWS_NS}
    if any(entry.image_loc for entry in news.entries):
        attrib["xmlns:image"] = IMAGE_NS
    urlset = ET.Element("urlset", attrib)

    for entry in news.entries:
        url = sub_element(urlset, "url")
        sub_element(url, "loc", entry.loc)
        article = sub_element(url, "news:news")
        publication = sub_element(article, "news:publication")
        sub_element(publication, "news:name", entry.publication_name)
        sub_element(publication, "news:language", entry.publication_language)
        sub_element(article, "news:publication_date", entry.publication_date)
        sub_element(article, "news:title", entry.title)
        if entry.keywords:
            sub_element(article, "news:keywords", ", ".join(entry.keywords))
        if entry.genres:
            sub_element(article, "news:genres", ", ".join(entry.genres))
        if entry.image_loc:
            image = sub_element(url, "image:image")
            sub_element(image, "image:loc", entry.image_loc)
    return render_xml(urlset)
