"""
In-memory content host.

Reference implementation of the ContentHost protocol: a registry of content
types with a builtin baseline type, a hook bus for lifecycle events, and an
output buffer for column rendering. Used by the test suite and by embedders
that drive the lifecycle themselves.
"""

from __future__ import annotations

import io
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TextIO, Union

from content_type_hub.domain.content_types.protocols import DEFAULT_PRIORITY
from content_type_hub.domain.content_types.registry import ContentTypeRegistry
from content_type_hub.utils.logging import get_logger

from .hooks import HookBus

logger = get_logger(__name__)

DEFAULT_BASELINE_SUPPORTS = (
    "title",
    "editor",
    "author",
    "thumbnail",
    "excerpt",
    "trackbacks",
    "custom-fields",
    "comments",
    "revisions",
    "post-formats",
)

SupportsInput = Union[Iterable[str], Mapping[str, bool]]


def _supports_map(supports: SupportsInput) -> Dict[str, bool]:
    if isinstance(supports, Mapping):
        return {str(name): bool(enabled) for name, enabled in supports.items()}
    return {str(name): True for name in supports}


class InMemoryHost:
    """
    Content host kept entirely in process memory.

    Args:
        baseline_type: Name of the builtin content type
        baseline_supports: Features enabled for the builtin type
        output: Stream column output is written to (a StringIO by default)
    """

    def __init__(
        self,
        baseline_type: str = "post",
        baseline_supports: Optional[SupportsInput] = None,
        output: Optional[TextIO] = None,
    ):
        self.hooks = HookBus()
        self._registry = ContentTypeRegistry()
        self._supports: Dict[str, Dict[str, bool]] = {}
        self.output: TextIO = output if output is not None else io.StringIO()
        self.rewrite_flush_count = 0
        self.baseline_type = baseline_type

        self.add_builtin_type(
            baseline_type,
            DEFAULT_BASELINE_SUPPORTS if baseline_supports is None else baseline_supports,
        )

    @property
    def registry(self) -> ContentTypeRegistry:
        return self._registry

    # --- Content types -------------------------------------------------------
    def add_builtin_type(self, name: str, supports: SupportsInput) -> None:
        supports_map = _supports_map(supports)
        self._supports[name] = supports_map
        self._registry.record(name, {"supports": list(supports_map)}, builtin=True)

    def register_content_type(self, name: str, arguments: Mapping[str, Any]) -> None:
        if not name:
            raise ValueError("Content type name cannot be empty")
        self._registry.record(name, dict(arguments))
        self._supports[name] = _supports_map(arguments.get("supports") or [])
        logger.debug("host.content_type_registered", content_type=name)

    def get_baseline_supports(self, type_name: str) -> Dict[str, bool]:
        # Released or not-yet-registered types have no supports
        entry = self._registry.get(type_name)
        if entry is None or not entry.is_registered:
            return {}
        return dict(self._supports.get(type_name, {}))

    def get_content_types(self, include_builtin: bool = False) -> List[str]:
        return self._registry.names(include_builtin=include_builtin)

    # --- Hooks ---------------------------------------------------------------
    def add_action(
        self,
        event: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        self.hooks.subscribe(event, callback, priority, accepted_args)

    def add_filter(
        self,
        event: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        self.hooks.subscribe(event, callback, priority, accepted_args)

    def remove_hook(self, event: str, callback: Callable[..., Any]) -> bool:
        return self.hooks.unsubscribe(event, callback)

    def do_action(self, event: str, *args: Any) -> None:
        self.hooks.dispatch(event, *args)

    def apply_filters(self, event: str, value: Any, *args: Any) -> Any:
        return self.hooks.filter(event, value, *args)

    # --- Output & routing ----------------------------------------------------
    def write(self, text: str) -> None:
        self.output.write(text)

    def flush_output(self) -> str:
        """Return and clear buffered output (StringIO outputs only)."""
        if not isinstance(self.output, io.StringIO):
            return ""
        value = self.output.getvalue()
        self.output.seek(0)
        self.output.truncate(0)
        return value

    def flush_rewrite_rules(self) -> None:
        self.rewrite_flush_count += 1
        logger.info(
            "host.rewrite_rules_flushed",
            content_types=self.get_content_types(),
            flush_count=self.rewrite_flush_count,
        )
