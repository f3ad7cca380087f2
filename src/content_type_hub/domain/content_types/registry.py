"""Content type registry - the process-wide table of known content types.

A ContentTypeDefinition acquires its entry when it is constructed and releases
it on teardown. The host records the resolved registration arguments into the
same table when a type is registered; builtin types are recorded directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from .exceptions import InvalidConfiguration

if TYPE_CHECKING:
    from .definition import ContentTypeDefinition


@dataclass
class ContentTypeEntry:
    """One row of the registry."""

    name: str
    definition: Optional["ContentTypeDefinition"] = None
    arguments: Optional[Dict[str, Any]] = None
    builtin: bool = False

    @property
    def is_registered(self) -> bool:
        return self.arguments is not None


class ContentTypeRegistry:
    """Registry of content types keyed by identifier."""

    def __init__(self) -> None:
        self._entries: Dict[str, ContentTypeEntry] = {}

    def acquire(self, name: str, definition: "ContentTypeDefinition") -> ContentTypeEntry:
        """Claim the entry for ``name`` on behalf of a live definition."""
        entry = self._entries.get(name)
        if entry is not None and entry.definition is not None:
            raise InvalidConfiguration(
                "Content type is already held by another definition",
                content_type=name,
            )
        if entry is None:
            entry = ContentTypeEntry(name=name)
            self._entries[name] = entry
        entry.definition = definition
        return entry

    def record(
        self, name: str, arguments: Dict[str, Any], builtin: bool = False
    ) -> ContentTypeEntry:
        """Store the registration arguments for ``name``."""
        entry = self._entries.get(name)
        if entry is None:
            entry = ContentTypeEntry(name=name, builtin=builtin)
            self._entries[name] = entry
        entry.arguments = dict(arguments)
        entry.builtin = entry.builtin or builtin
        return entry

    def release(self, name: str) -> None:
        """Drop the entry for ``name``; unknown names are ignored."""
        self._entries.pop(name, None)

    def get(self, name: str) -> Optional[ContentTypeEntry]:
        return self._entries.get(name)

    def names(self, include_builtin: bool = False) -> List[str]:
        return [
            name
            for name, entry in self._entries.items()
            if include_builtin or not entry.builtin
        ]

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
