"""Shared XML/HTML helpers for the generators.

Keeps escaping and document framing consistent across the sitemap, feed and
markup-fragment generators.
"""

from __future__ import annotations

import html
import xml.etree.ElementTree as ET

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for element content."""
    return html.escape(text, quote=False)


def escape_attr(text: str) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return html.escape(text, quote=True)


def sub_element(parent: ET.Element, tag: str, text: str = "", **attrib: str) -> ET.Element:
    """Append ``<tag>text</tag>`` to *parent* and return it."""
    child = ET.SubElement(parent, tag, attrib)
    if text:
        child.text = text
    return child


def render_xml(root: ET.Element) -> str:
    """Serialise *root* with two-space indentation behind an XML declaration.

    Element names such as ``news:news`` are written verbatim; namespace
    prefixes are declared as plain ``xmlns:*`` attributes on the root.
    """
    ET.indent(root, space="  ")
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"
