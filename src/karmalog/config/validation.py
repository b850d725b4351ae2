"""Configuration validation for karmalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from karmalog.config.models import KarmalogConfig
from karmalog.models import FeedTarget


@dataclass(frozen=True)
class ValidationError:
    """A configuration validation error."""

    path: str
    message: str


class ConfigValidator:
    """Validate KarmalogConfig dataclass against schema."""

    def validate(self, config: KarmalogConfig) -> list[ValidationError]:
        """Validate config, return list of errors (empty if valid)."""
        errors: list[ValidationError] = []

        if not isinstance(config.credits.url, str) or not config.credits.url:
            errors.append(ValidationError("credits.url", "Credits URL is required"))

        for value, path in [
            (config.credits.refresh_interval, "credits.refresh_interval"),
            (config.feeds.poll_interval, "feeds.poll_interval"),
        ]:
            if not _is_positive_int(value):
                errors.append(
                    ValidationError(path, f"Invalid interval: {value!r} (expected seconds > 0)")
                )

        if not _is_valid_target(config.feeds.default_target):
            errors.append(
                ValidationError(
                    "feeds.default_target",
                    f"Target {config.feeds.default_target!r} is not a [network, channel] pair",
                )
            )

        for i, entry in enumerate(config.feeds.googlecode):
            if not isinstance(entry.url, str) or not entry.url:
                errors.append(ValidationError(f"feeds.googlecode[{i}].url", "Feed URL is required"))
            for j, target in enumerate(entry.targets):
                if not _is_valid_target(target):
                    errors.append(
                        ValidationError(
                            f"feeds.googlecode[{i}].targets[{j}]",
                            f"Target {target!r} is not a [network, channel] pair",
                        )
                    )

        return errors


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_valid_target(target: Any) -> bool:
    if not isinstance(target, FeedTarget):
        return False
    return all(isinstance(part, str) and part for part in target)
