"""
Schema models for content type configuration.

Pydantic models describing the configuration a caller supplies for one content
type, the per-column render descriptors, and the provider entries that wrap a
configuration with its identifier. Keys are accepted in the camelCase form used
by configuration files (``pluralName``) as well as by field name
(``plural_name``).
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderDescriptor(BaseModel):
    """How to produce the content of one admin list-table column.

    Args:
        callback: Callable, renderer object, registered renderer name, or
            dotted import path
        echo: Whether the result is written to the host output
        args: Extra positional arguments; the record id is appended last
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    callback: Any = Field(default=None, description="Render callback reference")
    echo: bool = Field(default=True, description="Write result to host output")
    args: List[Any] = Field(default_factory=list, description="Extra callback args")

    @field_validator("args", mode="before")
    @classmethod
    def coerce_args(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (tuple, set)):
            return list(v)
        if not isinstance(v, list):
            return [v]
        return v

    @property
    def has_callback(self) -> bool:
        return bool(self.callback)


class ContentTypeConfig(BaseModel):
    """Configuration for a single content type."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        arbitrary_types_allowed=True,
    )

    args: Dict[str, Any] = Field(
        default_factory=dict, description="Raw registration arguments"
    )
    plural_name: Optional[str] = Field(default=None, alias="pluralName")
    singular_name: Optional[str] = Field(default=None, alias="singularName")
    additional_supports: Optional[Dict[str, bool]] = Field(
        default=None,
        alias="additionalSupports",
        description="Feature name -> enabled; False excludes a baseline feature",
    )
    columns_filter: Optional[Dict[str, Union[bool, str]]] = Field(
        default=None, alias="columnsFilter"
    )
    columns_data: Optional[Dict[str, RenderDescriptor]] = Field(
        default=None, alias="columnsData"
    )
    sortable_columns: Optional[List[str]] = Field(default=None, alias="sortableColumns")
    sort_columns_by: Optional[Dict[str, Any]] = Field(default=None, alias="sortColumnsBy")
    add_feed: bool = Field(default=False, alias="addFeed")

    @field_validator("args", mode="before")
    @classmethod
    def coerce_args(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("additional_supports", mode="before")
    @classmethod
    def normalize_additional_supports(cls, v: Any) -> Any:
        """Accept a list of feature names as well as a name -> bool mapping."""
        if v is None or isinstance(v, Mapping):
            return v
        if isinstance(v, str):
            return {v: True}
        return {name: True for name in v}

    @field_validator("sortable_columns", mode="before")
    @classmethod
    def normalize_sortable_columns(cls, v: Any) -> Any:
        """Keys of a mapping, or the items of a sequence."""
        if v is None:
            return v
        if isinstance(v, Mapping):
            return list(v.keys())
        if isinstance(v, str):
            return [v]
        return list(v)

    @field_validator("add_feed", mode="before")
    @classmethod
    def strict_add_feed(cls, v: Any) -> bool:
        # Only a literal True opts in to the feed.
        return v is True

    @property
    def labels_configured(self) -> bool:
        return isinstance(self.args.get("labels"), Mapping)

    @property
    def is_hierarchical(self) -> bool:
        return bool(self.args.get("hierarchical"))


class ProviderEntry(BaseModel):
    """One content type as handed to the provider.

    Missing keys fall back to the provider's default structure.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    autoload: bool = Field(default=False, description="Instantiate immediately")
    post_type_name: str = Field(default="", alias="postTypeName")
    config: Dict[str, Any] = Field(default_factory=dict)
    enable_permalink_handlers: bool = Field(
        default=False, alias="enablePermalinkHandlers"
    )
    permalink_handlers: Dict[str, Any] = Field(
        default_factory=dict, alias="permalinkHandlers"
    )

    @field_validator("post_type_name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("config", "permalink_handlers", mode="before")
    @classmethod
    def coerce_mapping(cls, v: Any) -> Any:
        return {} if v is None else v
