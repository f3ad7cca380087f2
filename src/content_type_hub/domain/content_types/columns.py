"""
Admin list-table columns.

Two concerns live here:

- Column transformers applied, in configuration order, to the header row the
  host builds for a content type's list table. The selection checkbox column
  (``cb``) is one transformer variant; every other entry overrides a label.
- Column renderers: resolution of a render descriptor's ``callback`` to
  something that can be called with the descriptor args plus the record id.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Protocol, Union, runtime_checkable

CHECKBOX_COLUMN = "cb"
CHECKBOX_MARKUP = '<input type="checkbox" />'


# =============================================================================
# Column transformers
# =============================================================================


@dataclass(frozen=True)
class CheckboxColumn:
    """Injects the host's selection checkbox column."""

    markup: str = CHECKBOX_MARKUP
    key: str = CHECKBOX_COLUMN

    def apply(self, columns: Dict[str, Any]) -> Dict[str, Any]:
        columns[self.key] = self.markup
        return columns


@dataclass(frozen=True)
class LabelColumn:
    """Sets (or overrides) a column's display label."""

    key: str
    label: Any

    def apply(self, columns: Dict[str, Any]) -> Dict[str, Any]:
        columns[self.key] = self.label
        return columns


ColumnTransformer = Union[CheckboxColumn, LabelColumn]


def build_column_transformers(
    columns_filter: Mapping[str, Any], checkbox_markup: str = CHECKBOX_MARKUP
) -> List[ColumnTransformer]:
    """One transformer per configured column, in configuration order."""
    transformers: List[ColumnTransformer] = []
    for key, value in columns_filter.items():
        if key == CHECKBOX_COLUMN and value is True:
            transformers.append(CheckboxColumn(markup=checkbox_markup))
        else:
            transformers.append(LabelColumn(key=key, label=value))
    return transformers


def apply_column_transformers(
    columns: Mapping[str, Any], transformers: List[ColumnTransformer]
) -> Dict[str, Any]:
    result = dict(columns)
    for transformer in transformers:
        result = transformer.apply(result)
    return result


# =============================================================================
# Column renderers
# =============================================================================


@runtime_checkable
class ColumnRenderer(Protocol):
    """Object form of a column callback."""

    def render(self, *args: Any) -> Any:
        ...


class RendererNotFound(LookupError):
    """Raised when a callback reference does not resolve to a callable."""

    pass


# Named renderers, looked up before import paths
_RENDERERS: Dict[str, Callable[..., Any]] = {}


def register_renderer(name: str, renderer: Union[Callable[..., Any], ColumnRenderer]) -> None:
    """Make ``renderer`` available to column configuration under ``name``."""
    _RENDERERS[name] = _as_callable(renderer, name)


def unregister_renderer(name: str) -> None:
    _RENDERERS.pop(name, None)


def _as_callable(target: Any, reference: str) -> Callable[..., Any]:
    if isinstance(target, ColumnRenderer) and not isinstance(target, type):
        return target.render
    if callable(target):
        return target
    raise RendererNotFound(f"Callback [{reference}] is not callable")


def _import_target(import_path: str) -> Any:
    """
    Import ``pkg.module:attr``, ``pkg.module.attr`` or ``pkg.module.Class.method``.

    Raises:
        RendererNotFound: If the path cannot be imported
    """
    if import_path.startswith("."):
        raise RendererNotFound(
            f"Callback [{import_path}] is a relative import path; use an absolute module path"
        )

    if ":" in import_path:
        module_path, _, attr_path = import_path.partition(":")
        try:
            target: Any = importlib.import_module(module_path)
            for attr in attr_path.split("."):
                target = getattr(target, attr)
            return target
        except (ImportError, AttributeError, TypeError, ValueError) as exc:
            raise RendererNotFound(f"Callback [{import_path}] was not found: {exc}") from exc

    parts = import_path.split(".")
    if len(parts) < 2:
        raise RendererNotFound(f"Callback [{import_path}] was not found")

    # Try module.attr first, then module.Class.method
    for split in (1, 2):
        if len(parts) <= split:
            continue
        module_path = ".".join(parts[:-split])
        try:
            target = importlib.import_module(module_path)
            for attr in parts[-split:]:
                target = getattr(target, attr)
            return target
        except (ImportError, AttributeError, TypeError, ValueError):
            continue

    raise RendererNotFound(f"Callback [{import_path}] was not found")


def resolve_renderer(callback: Any) -> Callable[..., Any]:
    """
    Resolve a render descriptor's callback reference.

    Args:
        callback: Callable, ColumnRenderer, registered name, or import path

    Returns:
        Callable accepting the descriptor args plus the record id

    Raises:
        RendererNotFound: If the reference cannot be resolved to a callable
    """
    if isinstance(callback, str):
        reference = callback.strip()
        if reference in _RENDERERS:
            return _RENDERERS[reference]
        return _as_callable(_import_target(reference), reference)
    return _as_callable(callback, repr(callback))


def describe_callback(callback: Any) -> str:
    if isinstance(callback, str):
        return callback
    return getattr(callback, "__qualname__", None) or repr(callback)


def registered_renderers() -> List[str]:
    return sorted(_RENDERERS)
