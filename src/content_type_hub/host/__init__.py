"""Host implementations and helper queries."""

from .helpers import get_all_content_types, get_all_supports_for_content_type
from .hooks import HookBus
from .in_memory import InMemoryHost

__all__ = [
    "HookBus",
    "InMemoryHost",
    "get_all_content_types",
    "get_all_supports_for_content_type",
]
