"""
Content type definition - one custom content type and its host callbacks.

A definition is validated and wired up as soon as it is constructed:

1. The identifier and configuration are checked (``InvalidConfiguration``).
2. The identifier's entry in the host registry is acquired.
3. Host callbacks are bound through the RegistrationGateway.

When the host fires its initialization event, ``register()`` resolves the
registration arguments (labels, supports, taxonomies) and hands them to the
host. ``close()`` (or leaving a ``with`` block) unbinds the callbacks and
releases the registry entry.

Example:
    >>> definition = ContentTypeDefinition(
    ...     "book", {"pluralName": "Books", "singularName": "Book"}, host
    ... )
    >>> host.do_action("init")
    >>> host.registry.get("book").arguments["labels"]["name"]
    'Books'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from content_type_hub.config.schema import ContentTypeConfig, RenderDescriptor
from content_type_hub.config.settings import get_settings
from content_type_hub.utils.logging import bind_context, get_logger

from .columns import (
    RendererNotFound,
    apply_column_transformers,
    build_column_transformers,
    describe_callback,
    registered_renderers,
    resolve_renderer,
)
from .exceptions import ConfigurationError, InvalidConfiguration
from .gateway import RegistrationGateway
from .labels import build_default_labels, merge_labels, name_from_identifier
from .protocols import CONTENT_TYPE_QUERY_VAR, FEED_QUERY_VAR, ContentHost
from .supports import SupportsResolver

logger = get_logger(__name__)

ConfigInput = Union[ContentTypeConfig, Mapping[str, Any], None]


def _parse_config(name: str, config: ConfigInput) -> ContentTypeConfig:
    if isinstance(config, ContentTypeConfig):
        if not config.model_fields_set and not config.model_extra:
            raise InvalidConfiguration(
                "For content type configuration, the config cannot be empty",
                content_type=name,
            )
        return config

    if not config:
        raise InvalidConfiguration(
            "For content type configuration, the config cannot be empty",
            content_type=name,
        )

    if not isinstance(config, Mapping):
        raise InvalidConfiguration(
            f"For content type configuration, the config must be a mapping, "
            f"got {type(config).__name__}",
            content_type=name,
        )

    try:
        return ContentTypeConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise InvalidConfiguration(
            f"Content type configuration validation failed: {exc}",
            content_type=name,
        ) from exc


class ContentTypeDefinition:
    """
    Registration arguments and host callbacks for a single content type.

    Args:
        name: Content type identifier (registration key, hook namespace)
        config: Content type configuration (mapping or ContentTypeConfig)
        host: Host the type is registered with
        supports: Supports resolver; one is built from ``config`` if omitted
        gateway: Gateway that binds host callbacks; one is built if omitted
        baseline_type: Builtin type whose supports seed this type
            (defaults to the ``baseline_content_type`` setting)

    Raises:
        InvalidConfiguration: If ``name`` or ``config`` is empty or malformed
    """

    def __init__(
        self,
        name: str,
        config: ConfigInput,
        host: ContentHost,
        supports: Optional[SupportsResolver] = None,
        gateway: Optional[RegistrationGateway] = None,
        baseline_type: Optional[str] = None,
    ):
        if not name:
            raise InvalidConfiguration(
                "For content type configuration, the content type cannot be empty"
            )

        try:
            parsed = _parse_config(name, config)
        except InvalidConfiguration as exc:
            logger.error(
                "content_type.invalid_configuration", content_type=name, error=str(exc)
            )
            raise

        settings = get_settings()

        self._name = name
        self._log = bind_context(content_type=name)
        self.config = parsed
        self.host = host
        self.baseline_type = baseline_type or settings.baseline_content_type
        self.supports = supports or SupportsResolver(
            self.config, host, baseline_type=self.baseline_type
        )
        if self.supports.host is None:
            self.supports.bind_host(host)
        self.gateway = gateway or RegistrationGateway(host)

        self._labels_configured = self.config.labels_configured
        self._column_transformers = build_column_transformers(
            self.config.columns_filter or {}, settings.checkbox_markup
        )
        self.query_vars_has_content_types = False
        self._closed = False

        self.host.registry.acquire(name, self)
        try:
            self.gateway.bind(self)
        except Exception:
            self.host.registry.release(name)
            raise

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Unbind host callbacks and release the registry entry."""
        if self._closed:
            return
        self.gateway.unbind(self)
        self.host.registry.release(self._name)
        self._closed = True
        self._log.info("content_type.released")

    def __enter__(self) -> "ContentTypeDefinition":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ContentTypeDefinition(name={self._name!r})"

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self) -> None:
        """Register the content type with the host.

        Raises:
            InvalidConfiguration: If the definition has been closed
        """
        if self._closed:
            raise InvalidConfiguration(
                "Cannot register a content type whose definition is closed",
                content_type=self._name,
            )
        arguments = self.build_arguments()
        self.host.register_content_type(self._name, arguments)
        self._log.info("content_type.registered", supports=arguments["supports"])

    def build_arguments(self) -> Dict[str, Any]:
        """Resolve labels, supports and taxonomies over the raw arguments."""
        args = dict(self.config.args)

        if not self._are_labels_set(args):
            args["labels"] = self.build_labels()

        args["supports"] = self.supports.build_supports(args)

        self._convert_taxonomies(args)

        return args

    def get_the_supports(self) -> List[str]:
        return self.supports.get_supports()

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    @property
    def plural_name(self) -> str:
        return self.config.plural_name or self._configured_label("name") or self._identifier_name()

    @property
    def singular_name(self) -> str:
        return self.config.singular_name or self._identifier_name()

    def build_labels(self) -> Dict[str, Any]:
        """Default labels, overridden by any configured ``args.labels``."""
        defaults = build_default_labels(self.plural_name, self.singular_name)
        overrides = self.config.args.get("labels") if self._labels_configured else None
        return merge_labels(defaults, overrides)

    def _configured_label(self, key: str) -> Optional[str]:
        if not self._labels_configured:
            return None
        return self.config.args["labels"].get(key) or None

    def _identifier_name(self) -> str:
        return name_from_identifier(self._name)

    @staticmethod
    def _are_labels_set(args: Mapping[str, Any]) -> bool:
        return bool(args.get("labels"))

    # ------------------------------------------------------------------
    # Taxonomies
    # ------------------------------------------------------------------

    @staticmethod
    def _convert_taxonomies(args: Dict[str, Any]) -> None:
        if "taxonomies" not in args or isinstance(args["taxonomies"], list):
            return

        taxonomies = args["taxonomies"]
        if taxonomies is None:
            args["taxonomies"] = []
        elif isinstance(taxonomies, str):
            args["taxonomies"] = [t.strip() for t in taxonomies.split(",") if t.strip()]
        else:
            args["taxonomies"] = list(taxonomies)

    # ------------------------------------------------------------------
    # Feed membership
    # ------------------------------------------------------------------

    def add_or_remove_to_from_rss_feed(self, query_vars: Mapping[str, Any]) -> Mapping[str, Any]:
        """
        Add this content type to, or remove it from, a feed request.

        Args:
            query_vars: Query variables from request parsing

        Returns:
            The query variables; a modified copy when membership changed
        """
        if query_vars.get(FEED_QUERY_VAR) is None:
            return query_vars

        present = self.is_content_type_in_query_var(query_vars)

        if self.config.add_feed and not present:
            return self._add_to_feed(query_vars)

        if not self.config.add_feed and present:
            return self._remove_from_feed(query_vars)

        return query_vars

    def does_query_vars_have_content_types(self, query_vars: Mapping[str, Any]) -> bool:
        """Check for a list-valued content type query variable."""
        self.query_vars_has_content_types = isinstance(
            query_vars.get(CONTENT_TYPE_QUERY_VAR), (list, tuple)
        )
        return self.query_vars_has_content_types

    def is_content_type_in_query_var(self, query_vars: Mapping[str, Any]) -> bool:
        if not self.does_query_vars_have_content_types(query_vars):
            return False
        return self._name in query_vars[CONTENT_TYPE_QUERY_VAR]

    def _add_to_feed(self, query_vars: Mapping[str, Any]) -> Dict[str, Any]:
        updated = dict(query_vars)
        if self.query_vars_has_content_types:
            updated[CONTENT_TYPE_QUERY_VAR] = [*query_vars[CONTENT_TYPE_QUERY_VAR], self._name]
        else:
            updated[CONTENT_TYPE_QUERY_VAR] = [self.baseline_type, self._name]
        self._log.debug("content_type.feed_added")
        return updated

    def _remove_from_feed(self, query_vars: Mapping[str, Any]) -> Dict[str, Any]:
        updated = dict(query_vars)
        updated[CONTENT_TYPE_QUERY_VAR] = [
            content_type
            for content_type in query_vars[CONTENT_TYPE_QUERY_VAR]
            if content_type != self._name
        ]
        self._log.debug("content_type.feed_removed")
        return updated

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    def columns_filter(self, columns: Mapping[str, Any]) -> Dict[str, Any]:
        """Apply the configured column labels to the list-table header."""
        return apply_column_transformers(columns, self._column_transformers)

    def columns_data(self, column_name: str, record_id: Any) -> Any:
        """
        Render one cell of the admin list table.

        Args:
            column_name: The name of the column to display
            record_id: The current record id, appended to the callback args

        Returns:
            The callback result, or None when the column is not configured

        Raises:
            ConfigurationError: If the configured callback cannot be resolved
        """
        descriptor = self._column_descriptor(column_name)
        if descriptor is None:
            return None

        try:
            renderer = resolve_renderer(descriptor.callback)
        except RendererNotFound as exc:
            self._log.error(
                "content_type.column_callback_unresolved",
                column=column_name,
                callback=describe_callback(descriptor.callback),
                registered_renderers=registered_renderers(),
            )
            raise ConfigurationError(
                f"The callback [{describe_callback(descriptor.callback)}] was not found; "
                "column callbacks must be callable",
                content_type=self._name,
                column=column_name,
            ) from exc

        result = renderer(*descriptor.args, record_id)
        if descriptor.echo:
            self.host.write("" if result is None else str(result))
        return result

    def _column_descriptor(self, column_name: str) -> Optional[RenderDescriptor]:
        columns_data = self.config.columns_data
        if not columns_data:
            return None
        descriptor = columns_data.get(column_name)
        if descriptor is None or not descriptor.has_callback:
            return None
        return descriptor

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def make_columns_sortable(self, sortable_columns: Mapping[str, Any]) -> Dict[str, Any]:
        """Mark each configured column as sortable by itself."""
        result = dict(sortable_columns)
        for key in self.config.sortable_columns or []:
            result[key] = key
        return result

    def sort_columns_by(self, query_vars: Mapping[str, Any]) -> Mapping[str, Any]:
        # TODO: apply sortColumnsBy (meta_key/orderby) once the ordering rules are settled
        return query_vars
