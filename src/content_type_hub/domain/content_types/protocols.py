"""Content host protocol - the narrow interface definitions call into.

The host owns storage, querying and admin rendering. Definitions only need to
register themselves, read baseline supports, subscribe to lifecycle events and
write column output.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Protocol, runtime_checkable

from .registry import ContentTypeRegistry

# Lifecycle events
INIT_EVENT = "init"
REQUEST_EVENT = "request"

# Query variables read by the feed filter
FEED_QUERY_VAR = "feed"
CONTENT_TYPE_QUERY_VAR = "post_type"

DEFAULT_PRIORITY = 10


def columns_filter_event(content_type: str) -> str:
    """Admin list-table header build event for ``content_type``."""
    return f"manage_{content_type}_posts_columns"


def column_render_event(content_type: str) -> str:
    """Admin list-table cell render event for ``content_type``."""
    return f"manage_{content_type}_posts_custom_column"


def sortable_columns_event(content_type: str) -> str:
    """Sortable-columns registry build event for ``content_type``."""
    return f"manage_edit-{content_type}_sortable_columns"


@runtime_checkable
class ContentHost(Protocol):
    """Capabilities a content-management host must provide."""

    @property
    def registry(self) -> ContentTypeRegistry:
        """Process-wide table of known content types."""
        ...

    def register_content_type(self, name: str, arguments: Mapping[str, Any]) -> None:
        """Register or re-register a content type."""
        ...

    def get_baseline_supports(self, type_name: str) -> Dict[str, bool]:
        """Ordered feature -> enabled mapping for ``type_name``."""
        ...

    def get_content_types(self, include_builtin: bool = False) -> List[str]:
        ...

    def add_action(
        self,
        event: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        ...

    def add_filter(
        self,
        event: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        ...

    def remove_hook(self, event: str, callback: Callable[..., Any]) -> bool:
        ...

    def do_action(self, event: str, *args: Any) -> None:
        ...

    def apply_filters(self, event: str, value: Any, *args: Any) -> Any:
        ...

    def write(self, text: str) -> None:
        """Write to the active output stream."""
        ...

    def flush_rewrite_rules(self) -> None:
        """Regenerate URL routing rules."""
        ...
