"""Configuration management for content_type_hub.

Usage:
    >>> from content_type_hub.config import get_settings
    >>> get_settings().baseline_content_type
    'post'
"""

from content_type_hub.config.schema import ContentTypeConfig, ProviderEntry, RenderDescriptor
from content_type_hub.config.settings import Settings, get_settings

__all__ = [
    "ContentTypeConfig",
    "ProviderEntry",
    "RenderDescriptor",
    "Settings",
    "get_settings",
]
