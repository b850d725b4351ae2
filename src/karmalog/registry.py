"""Registry of which (network, channel) targets each project feeds."""

from __future__ import annotations

from collections.abc import Iterator

from karmalog.models import FeedTarget


class FeedRegistry:
    def __init__(self) -> None:
        self._feeds: dict[str, list[FeedTarget]] = {}

    def __contains__(self, project: object) -> bool:
        return project in self._feeds

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._feeds))

    def __len__(self) -> int:
        return len(self._feeds)

    def add(self, project: str, target: FeedTarget | tuple[str, str]) -> bool:
        """Register a target for a project. Returns False if it was already there."""
        target = FeedTarget(*target)
        existing = self._feeds.setdefault(project, [])
        if target in existing:
            return False
        existing.append(target)
        return True

    def targets(self, project: str) -> list[FeedTarget]:
        return list(self._feeds.get(project, []))
