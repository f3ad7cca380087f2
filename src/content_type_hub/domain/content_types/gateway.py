"""
Registration gateway - binds content type definitions to host events.

The gateway is the only place that knows which definition callback listens to
which host event. It also keeps track of every definition it has bound so that
an administrator-triggered flush can re-register all of them before the host
regenerates its routing rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Tuple

from content_type_hub.utils.logging import get_logger

from .protocols import (
    DEFAULT_PRIORITY,
    INIT_EVENT,
    REQUEST_EVENT,
    ContentHost,
    column_render_event,
    columns_filter_event,
    sortable_columns_event,
)

if TYPE_CHECKING:
    from .definition import ContentTypeDefinition

logger = get_logger(__name__)

Binding = Tuple[str, Callable[..., Any]]


class RegistrationGateway:
    """Thin binder between definitions and the host's hook system."""

    def __init__(self, host: ContentHost):
        self.host = host
        self._definitions: Dict[str, "ContentTypeDefinition"] = {}
        self._bindings: Dict[str, List[Binding]] = {}

    def bind(self, definition: "ContentTypeDefinition") -> List[str]:
        """
        Subscribe the definition's callbacks to host events.

        Column and sorting callbacks are only subscribed when their
        configuration section is present and non-empty.

        Returns:
            Names of the events subscribed to
        """
        name = definition.name
        config = definition.config
        bindings: List[Binding] = []

        self.host.add_action(INIT_EVENT, definition.register)
        bindings.append((INIT_EVENT, definition.register))

        if config.columns_filter:
            event = columns_filter_event(name)
            self.host.add_filter(event, definition.columns_filter)
            bindings.append((event, definition.columns_filter))

        if config.columns_data:
            event = column_render_event(name)
            self.host.add_action(event, definition.columns_data, DEFAULT_PRIORITY, 2)
            bindings.append((event, definition.columns_data))

        if config.sortable_columns:
            event = sortable_columns_event(name)
            self.host.add_filter(event, definition.make_columns_sortable)
            bindings.append((event, definition.make_columns_sortable))

        self.host.add_filter(REQUEST_EVENT, definition.add_or_remove_to_from_rss_feed)
        bindings.append((REQUEST_EVENT, definition.add_or_remove_to_from_rss_feed))

        self._definitions[name] = definition
        self._bindings[name] = bindings

        events = [event for event, _ in bindings]
        logger.info("content_type.hooks_bound", content_type=name, events=events)
        return events

    def unbind(self, definition: "ContentTypeDefinition") -> None:
        """Remove every subscription made for ``definition``."""
        name = definition.name
        if self._definitions.get(name) is not definition:
            return

        for event, callback in self._bindings.pop(name, []):
            self.host.remove_hook(event, callback)
        del self._definitions[name]
        logger.debug("content_type.hooks_unbound", content_type=name)

    def definitions(self) -> List["ContentTypeDefinition"]:
        return list(self._definitions.values())

    def is_bound(self, name: str) -> bool:
        return name in self._definitions

    def flush_rewrite_rules(self) -> None:
        """Register every tracked content type, then regenerate routing rules."""
        names = []
        for definition in list(self._definitions.values()):
            definition.register()
            names.append(definition.name)

        self.host.flush_rewrite_rules()
        logger.info("content_type.rewrite_rules_flushed", content_types=names)
