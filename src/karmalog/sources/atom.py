"""Atom document parsing — already-fetched feed text to FeedItem records."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from karmalog.models import FeedItem

ATOM_NS = {"atom": "http://www.w3.org/2005/Atom"}


class FeedParseError(ValueError):
    """Raised when a feed document is not well-formed Atom."""


def parse_atom_feed(text: str) -> list[FeedItem]:
    """Extract entries in document order.

    A missing author becomes None; other missing elements become empty strings.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        msg = f"Invalid Atom feed: {e}"
        raise FeedParseError(msg) from e

    items: list[FeedItem] = []
    for entry in root.findall("atom:entry", ATOM_NS):
        name = entry.find("atom:author/atom:name", ATOM_NS)
        link = entry.find("atom:link", ATOM_NS)
        content = entry.find("atom:content", ATOM_NS)
        if content is None:
            content = entry.find("atom:summary", ATOM_NS)
        items.append(
            FeedItem(
                author=name.text if name is not None and name.text else None,
                link=link.get("href", "") if link is not None else "",
                updated=entry.findtext("atom:updated", "", ATOM_NS).strip(),
                content=(content.text or "") if content is not None else "",
            )
        )
    return items
