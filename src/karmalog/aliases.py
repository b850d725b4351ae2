"""Alias table built from a CREDITS-style document.

Commit identities (svn usernames, full names, old nicks) are consolidated onto
one canonical username so karma lands on the right IRC nick. Given::

    N: Will "Coke" Coleda
    U: coke
    A: wcoleda
    E: will@coleda.com

both ``Will "Coke" Coleda`` and ``wcoleda`` resolve to ``coke``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

from karmalog.models import AliasRecord

logger = logging.getLogger("karmalog.aliases")

DELIMITER_RE = re.compile(r"----------")
FIELD_RE = re.compile(r"^([A-Z]):\s+(.+)")
ALIAS_SPLIT_RE = re.compile(r",\s*")
QUOTED_RE = re.compile(r'^"?(.+?)"?$')


def parse_records(text: str) -> list[AliasRecord]:
    """Split a credits document into records, one per blank-line-delimited entry.

    Everything up to and including the first dashed delimiter line is skipped.
    Repeated field letters within one entry overwrite earlier values.
    """
    lines = text.split("\n")
    start = 0
    for i, line in enumerate(lines):
        if DELIMITER_RE.search(line):
            start = i + 1
            break
    else:
        return []

    entries: list[dict[str, str]] = [{}]
    for line in lines[start:]:
        match = FIELD_RE.match(line)
        if match:
            entries[-1][match.group(1)] = match.group(2)
        if not line:
            entries.append({})

    return [_to_record(entry) for entry in entries]


def _to_record(entry: dict[str, str]) -> AliasRecord:
    aliases: list[str] = []
    if "A" in entry:
        for alias in ALIAS_SPLIT_RE.split(entry["A"]):
            if not alias:
                continue
            match = QUOTED_RE.match(alias)
            aliases.append(match.group(1) if match else alias)
    return AliasRecord(username=entry.get("U"), display_name=entry.get("N"), aliases=aliases)


def build_alias_map(records: list[AliasRecord]) -> dict[str, str]:
    """Map display names and aliases to usernames. Records without U: are dropped."""
    aliases: dict[str, str] = {}
    for record in records:
        if not record.usable:
            continue
        if record.display_name is not None:
            aliases[record.display_name] = record.username
        for alias in record.aliases:
            aliases[alias] = record.username
    return aliases


class AliasTable:
    """Alias → canonical username lookup, replaced wholesale on every parse.

    Readers only ever see a complete snapshot: ``parse`` builds a fresh mapping
    and swaps the reference in one assignment.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases: Mapping[str, str] = MappingProxyType(dict(aliases or {}))

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, identity: object) -> bool:
        return identity in self._aliases

    @property
    def snapshot(self) -> Mapping[str, str]:
        return self._aliases

    def parse(self, text: str) -> int:
        """Rebuild the table from credits text. Returns the alias count."""
        new_aliases = build_alias_map(parse_records(text))
        logger.info("karmalog: aliases file parsed, %d aliases total", len(new_aliases))
        self._aliases = MappingProxyType(new_aliases)
        return len(new_aliases)

    def resolve(self, identity: str) -> str:
        return self._aliases.get(identity, identity)

    def render(self, identity: str | None) -> str:
        """Karma-ize an identity: ``coke++``, ``(Foo Bar)++`` or ``unknown++``."""
        if identity is None:
            return "unknown++"
        user = self.resolve(identity)
        if " " in user:
            user = f"({user})"
        return f"{user}++"
