"""
Exception hierarchy for content type definitions.

Errors carry the content type identifier (and the column, for render-time
failures) so that messages point at the offending configuration.
"""

from typing import Optional


class ContentTypeError(Exception):
    """Base exception for all content type errors."""

    def __init__(
        self,
        message: str,
        content_type: Optional[str] = None,
        column: Optional[str] = None,
    ):
        self.content_type = content_type
        self.column = column

        # Build contextual error message
        context_parts = []
        if content_type:
            context_parts.append(f"content_type='{content_type}'")
        if column:
            context_parts.append(f"column='{column}'")

        if context_parts:
            full_message = f"{message} ({', '.join(context_parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class InvalidConfiguration(ContentTypeError, ValueError):
    """
    Raised when a content type cannot be constructed.

    The identifier is empty, the configuration is empty, or a configuration
    section has the wrong shape. Raised before any host state is touched.
    """

    pass


class ConfigurationError(ContentTypeError):
    """
    Raised when a configured column callback cannot be resolved or invoked.

    Scoped to a single column/row render; other columns are unaffected.
    """

    pass
