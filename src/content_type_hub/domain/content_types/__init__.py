"""Content type definitions, supports resolution and host binding."""

from .columns import ColumnRenderer, register_renderer, unregister_renderer
from .definition import ContentTypeDefinition
from .exceptions import ConfigurationError, ContentTypeError, InvalidConfiguration
from .gateway import RegistrationGateway
from .protocols import ContentHost
from .registry import ContentTypeEntry, ContentTypeRegistry
from .supports import SupportsResolver

__all__ = [
    "ColumnRenderer",
    "ConfigurationError",
    "ContentHost",
    "ContentTypeDefinition",
    "ContentTypeEntry",
    "ContentTypeError",
    "ContentTypeRegistry",
    "InvalidConfiguration",
    "RegistrationGateway",
    "SupportsResolver",
    "register_renderer",
    "unregister_renderer",
]
