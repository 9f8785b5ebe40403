from __future__ import annotations

from typing import List, Optional


class TombCrawlerError(Exception):
    """Base exception for the Tomb Crawler project."""


class EntityAliasError(TombCrawlerError, ValueError):
    """Raised when one entity handle is used for both sides of a two-entity mutation."""


class UnknownEntityError(TombCrawlerError, KeyError):
    """Raised when an entity handle is not present in the store."""


class SettingsError(TombCrawlerError):
    """Raised when a settings document fails validation."""

    def __init__(self, message: str, errors: Optional[List[object]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in getattr(e, "path", [])) or "<root>"
            parts.append(f" - at {path}: {getattr(e, 'message', e)}")
        return "\n".join(parts)
