"""
Supports resolution for content types.

Builds the ordered list of features ("supports") handed to the host. Explicit
``supports`` in the registration arguments win outright; otherwise the list is
seeded from the baseline content type's features, merged with the configured
additional supports, and stripped of disabled entries. Hierarchical types get
``page-attributes`` appended when it is missing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional

from content_type_hub.config.schema import ContentTypeConfig

if TYPE_CHECKING:
    from .protocols import ContentHost

PAGE_ATTRIBUTES = "page-attributes"
DEFAULT_BASELINE_TYPE = "post"


def _dedupe(features: Iterable[Any]) -> List[str]:
    seen: Dict[str, None] = {}
    for feature in features:
        if feature:
            seen.setdefault(str(feature), None)
    return list(seen)


class SupportsResolver:
    """Resolve the supported features for one content type."""

    def __init__(
        self,
        config: ContentTypeConfig,
        host: Optional["ContentHost"] = None,
        baseline_type: str = DEFAULT_BASELINE_TYPE,
    ):
        self.config = config
        self.host = host
        self.baseline_type = baseline_type
        self.supports: List[str] = []

    def bind_host(self, host: "ContentHost") -> None:
        self.host = host

    def build_supports(self, args: Mapping[str, Any]) -> List[str]:
        """
        Build the supports argument.

        Args:
            args: Raw registration arguments

        Returns:
            Ordered list of feature names
        """
        if "supports" in args:
            self.supports = self._explicit_supports(args["supports"])
        else:
            self.supports = self._supports_by_configuration()

        self._add_page_attributes(args)
        return list(self.supports)

    def get_supports(self) -> List[str]:
        """Supports from the most recent build (empty before the first)."""
        return list(self.supports)

    def _explicit_supports(self, supports: Any) -> List[str]:
        if not supports:
            return []
        if isinstance(supports, str):
            return [supports]
        if isinstance(supports, Mapping):
            return _dedupe(name for name, enabled in supports.items() if enabled)
        return _dedupe(supports)

    def _supports_by_configuration(self) -> List[str]:
        supports: Dict[str, Any] = dict(self._baseline_supports())

        if self.config.additional_supports is not None:
            supports.update(self.config.additional_supports)

        return [name for name, enabled in supports.items() if name and enabled]

    def _baseline_supports(self) -> Dict[str, bool]:
        if self.host is None:
            raise RuntimeError("SupportsResolver needs a host to read baseline supports")
        return self.host.get_baseline_supports(self.baseline_type)

    def _add_page_attributes(self, args: Mapping[str, Any]) -> None:
        if args.get("hierarchical") and PAGE_ATTRIBUTES not in self.supports:
            self.supports.append(PAGE_ATTRIBUTES)
