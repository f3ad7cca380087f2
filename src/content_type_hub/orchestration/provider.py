"""
Content type provider.

Turns provider entries (``autoload``, ``postTypeName``, ``config``) into
ContentTypeDefinition instances that share one RegistrationGateway. Autoload
entries are instantiated as soon as they are provided; the rest are
instantiated the first time they are requested.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from content_type_hub.config.loader import load_content_type_entries
from content_type_hub.config.schema import ProviderEntry
from content_type_hub.config.settings import get_settings
from content_type_hub.domain.content_types import (
    ContentHost,
    ContentTypeDefinition,
    InvalidConfiguration,
    RegistrationGateway,
)
from content_type_hub.utils.logging import get_logger

logger = get_logger(__name__)

EntryInput = Union[ProviderEntry, Mapping[str, Any]]


class ContentTypeProvider:
    """Build and track the content types of one host."""

    def __init__(self, host: ContentHost, gateway: Optional[RegistrationGateway] = None):
        self.host = host
        self.gateway = gateway or RegistrationGateway(host)
        self._entries: Dict[str, ProviderEntry] = {}
        self._instances: Dict[str, ContentTypeDefinition] = {}

    @staticmethod
    def get_default_structure() -> Dict[str, Any]:
        """Values used for keys an entry leaves out."""
        return ProviderEntry().model_dump(by_alias=True)

    def provide(self, entry: EntryInput) -> Optional[ContentTypeDefinition]:
        """
        Add an entry; instantiate it immediately when it autoloads.

        Returns:
            The definition for autoload entries, otherwise None

        Raises:
            InvalidConfiguration: If the entry is malformed or its content
                type cannot be constructed
        """
        parsed = self._parse_entry(entry)
        name = parsed.post_type_name

        if name in self._entries:
            raise InvalidConfiguration("Content type is already provided", content_type=name)
        self._entries[name] = parsed

        if parsed.autoload:
            try:
                return self.get(name)
            except InvalidConfiguration:
                del self._entries[name]
                raise
        return None

    def load(self, path: Optional[Union[str, Path]] = None) -> List[str]:
        """
        Provide every entry of a YAML file.

        Args:
            path: YAML file; defaults to the ``content_types_config`` setting

        Returns:
            The provided content type names, in file order
        """
        if path is None:
            path = get_settings().content_types_config
        names = []
        for entry in load_content_type_entries(path):
            self.provide(entry)
            names.append(entry.post_type_name)
        return names

    def get(self, name: str) -> ContentTypeDefinition:
        """Return the definition for ``name``, instantiating it if needed."""
        if name in self._instances:
            return self._instances[name]

        entry = self._entries.get(name)
        if entry is None:
            raise KeyError(f"Content type '{name}' has not been provided")

        definition = self._build(entry)
        self._instances[name] = definition
        return definition

    def names(self) -> List[str]:
        return list(self._entries)

    def instantiated(self) -> List[str]:
        return list(self._instances)

    def flush_rewrite_rules(self) -> None:
        """Instantiate pending entries, re-register all, regenerate routing rules."""
        for name in self._entries:
            self.get(name)
        self.gateway.flush_rewrite_rules()

    def close(self) -> None:
        """Tear down every instantiated definition."""
        for definition in self._instances.values():
            definition.close()
        self._instances.clear()

    def _parse_entry(self, entry: EntryInput) -> ProviderEntry:
        if isinstance(entry, ProviderEntry):
            return entry
        raw = dict(entry)
        try:
            return ProviderEntry.model_validate(raw)
        except ValidationError as exc:
            raise InvalidConfiguration(
                f"Content type provider entry validation failed: {exc}",
                content_type=raw.get("postTypeName") or raw.get("post_type_name") or None,
            ) from exc

    def _build(self, entry: ProviderEntry) -> ContentTypeDefinition:
        definition = ContentTypeDefinition(
            entry.post_type_name,
            entry.config,
            self.host,
            gateway=self.gateway,
        )
        logger.info(
            "content_type.provided",
            content_type=entry.post_type_name,
            autoload=entry.autoload,
        )
        return definition
