"""Provider that builds content type definitions from configuration entries."""

from .provider import ContentTypeProvider

__all__ = ["ContentTypeProvider"]
