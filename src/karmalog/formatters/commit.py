"""Commit description parsing and karma rendering.

Feed entries carry an HTML-encoded description of the form::

    Changed Paths:
    &nbsp;&nbsp;&nbsp;&nbsp;Modify&nbsp;&nbsp;&nbsp;&nbsp;/trunk/src/a.c<br/>
    &nbsp;&nbsp;&nbsp;&nbsp;Add&nbsp;&nbsp;&nbsp;&nbsp;/trunk/src/b.c<br/>

    fix the frobnicator

which renders as::

    pynie: r123 | coke++ | trunk/src/ (2 files):
    pynie: fix the frobnicator
    pynie: review: http://code.google.com/p/pynie/source/detail?r=123
"""

from __future__ import annotations

import html
import logging
import re

from karmalog.karma import KarmaRenderer
from karmalog.models import CommitDescription, CommitEvent, FeedItem

logger = logging.getLogger("karmalog.formatters.commit")

NBSP4 = "\xa0" * 4
CHANGED_PATHS_HEADER = "Changed Paths:"
CHANGED_PATH_RE = re.compile(NBSP4 + r"(?:Modify|Add|Delete)" + NBSP4 + r"/(.+)")
COPY_SOURCE_PREFIX = " (from /"
LINE_BREAK_MARKER = "<br/>"
LINE_BREAK_RE = re.compile(r"<br */>")
LOG_SPLIT_RE = re.compile(r"[\r\n]+")
# Trim set without \xa0, which pads changed-path lines.
ASCII_WHITESPACE = " \t\n\r\f\v"
LONG_COMMIT_LINK_RE = re.compile(r"github.*commit/[0-9a-f]{40}$")
SHORT_HASH_LENGTH = 10


def common_path_prefix(paths: list[str]) -> str | None:
    """Longest run of leading path segments shared by every path.

    A single path is its own prefix. Directory prefixes keep their trailing
    slash: ``["src/a.c", "src/b.c"]`` gives ``"src/"``.
    """
    if not paths:
        return None
    if all(p == paths[0] for p in paths):
        return paths[0]

    split = [p.split("/") for p in paths]
    common: list[str] = []
    for segments in zip(*split):
        if any(s != segments[0] for s in segments):
            break
        common.append(segments[0])
    if not common:
        return ""
    return "/".join(common) + "/"


def shorten_commit_link(link: str) -> str:
    """Cut a GitHub 40-hex ``commit/`` link down to a 10-character short hash."""
    if LONG_COMMIT_LINK_RE.search(link):
        return link[: len(link) - (40 - SHORT_HASH_LENGTH)]
    return link


def split_log_lines(log: str) -> list[str]:
    log = LINE_BREAK_RE.sub("", log)
    log = html.unescape(log)
    lines = LOG_SPLIT_RE.split(log)
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_description(body: str) -> CommitDescription:
    """Split a feed description into touched files, log body and path prefix."""
    desc = html.unescape(body).strip(ASCII_WHITESPACE)
    desc = desc.replace(LINE_BREAK_MARKER, "")
    lines = desc.split("\n") if desc else []
    if lines and lines[0] == CHANGED_PATHS_HEADER:
        lines.pop(0)

    files: list[str] = []
    while lines and re.search(r"[^ ]", lines[0]):
        line = lines.pop(0)
        match = CHANGED_PATH_RE.search(line)
        if match:
            files.append(match.group(1))
        elif line.startswith(COPY_SOURCE_PREFIX):
            # rename/copy source: this line and the next
            if lines:
                lines.pop(0)
        else:
            lines.insert(0, line)
            break
        while lines and lines[0] == " ":
            lines.pop(0)

    while lines and lines[-1] == "":
        lines.pop()
    log = "\n".join(lines).lstrip(ASCII_WHITESPACE)

    prefix = common_path_prefix(files)
    if prefix is not None:
        prefix = prefix.removeprefix("/")
        if len(files) > 1:
            prefix += f" ({len(files)} files)"

    return CommitDescription(files=files, log=log, prefix=prefix)


class CommitFormatter:
    """Turn one feed entry into karma message lines."""

    def __init__(self, renderer: KarmaRenderer) -> None:
        self._renderer = renderer

    def parse(self, feed_id: str, revision: str | None, item: FeedItem) -> CommitEvent:
        return CommitEvent(
            feed=feed_id,
            revision=revision,
            description=parse_description(item.content),
            author=item.author,
            link=shorten_commit_link(item.link) if item.link else None,
        )

    def render(self, event: CommitEvent) -> list[str]:
        # Author goes in raw; the renderer owns alias lookup and parenthesizing.
        return self._renderer.render_karma_message(
            feed=event.feed,
            rev=f"r{event.revision}" if event.revision is not None else "r?",
            user=event.author,
            log_lines=split_log_lines(event.description.log),
            link=event.link,
            prefix=event.description.prefix,
        )

    def format(self, feed_id: str, revision: str | None, item: FeedItem) -> list[str]:
        event = self.parse(feed_id, revision, item)
        logger.info("%s: output_item: output rev %s", feed_id, revision)
        return self.render(event)
