"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from karmalog.aliases import AliasTable
from karmalog.models import FeedItem
from karmalog.sinks.base import Sink

NBSP4 = "&nbsp;" * 4

CREDITS_TEXT = """\
=head1 Parrot CREDITS

Following in the steps of other open source projects that
eventually take over the world, here is the partial list
of people who have contributed to Parrot.

----------

N: Will "Coke" Coleda
U: coke
A: wcoleda, "Will C"
E: will@coleda.com
D: Tcl language (partcl), APL, website, various languages/ upkeep, misc.

N: James E Keenan
U: jkeenan
E: jkeen@verizon.net

N: Nobody Special
A: ghost, "Phantom User"
D: no username, contributes nothing

N: Jonathan Worthington
U: jonathan
U: jnthn
A: "JW"

=cut
"""


def make_description(files: list[tuple[str, str]], log: str) -> str:
    """Build an HTML-encoded Google Code svn change description."""
    lines = ["Changed Paths:"]
    for action, path in files:
        lines.append(f"{NBSP4}{action}{NBSP4}{path}<br/>")
    lines.append("")
    lines.append(log)
    return "\n".join(lines)


@pytest.fixture
def credits_text() -> str:
    return CREDITS_TEXT


@pytest.fixture
def aliases() -> AliasTable:
    table = AliasTable()
    table.parse(CREDITS_TEXT)
    return table


@pytest.fixture
def sink() -> MagicMock:
    return MagicMock(spec=Sink)


@pytest.fixture
def sample_items() -> list[FeedItem]:
    """Realistic svn change entries, deliberately out of order."""
    return [
        FeedItem(
            author="wcoleda",
            link="http://code.google.com/p/partcl/source/detail?r=42",
            updated="2009-03-02T10:00:00Z",
            content=make_description(
                [("Modify", "/trunk/src/a.c"), ("Add", "/trunk/src/b.c")],
                "fix the frobnicator",
            ),
        ),
        FeedItem(
            author="jkeenan",
            link="http://code.google.com/p/partcl/source/detail?r=41",
            updated="2009-03-01T09:00:00Z",
            content=make_description([("Modify", "/trunk/README")], "typo"),
        ),
    ]


ATOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Subversion commits to project partcl on Google Code</title>
  <updated>2009-03-02T10:00:00Z</updated>
  <entry>
    <updated>2009-03-02T10:00:00Z</updated>
    <title>Revision 42: fix the frobnicator</title>
    <link rel="alternate" type="text/html" href="http://code.google.com/p/partcl/source/detail?r=42" />
    <author><name>wcoleda</name></author>
    <content type="html">Changed Paths:
    &amp;nbsp;&amp;nbsp;&amp;nbsp;&amp;nbsp;Modify&amp;nbsp;&amp;nbsp;&amp;nbsp;&amp;nbsp;/trunk/src/a.c&lt;br/&gt;
&amp;nbsp;&amp;nbsp;&amp;nbsp;&amp;nbsp;Add&amp;nbsp;&amp;nbsp;&amp;nbsp;&amp;nbsp;/trunk/src/b.c&lt;br/&gt;

fix the &amp;quot;frobnicator&amp;quot;</content>
  </entry>
  <entry>
    <updated>2009-03-01T09:00:00Z</updated>
    <title>Revision 41: typo</title>
    <link rel="alternate" type="text/html" href="http://code.google.com/p/partcl/source/detail?r=41" />
    <author><name>James E Keenan</name></author>
    <content type="html">Changed Paths:
    &amp;nbsp;&amp;nbsp;&amp;nbsp;&amp;nbsp;Modify&amp;nbsp;&amp;nbsp;&amp;nbsp;&amp;nbsp;/trunk/README&lt;br/&gt;

typo</content>
  </entry>
</feed>
"""


@pytest.fixture
def atom_feed() -> str:
    return ATOM_FEED
