"""Default admin labels for a content type."""

from typing import Dict, Mapping, Optional

DEFAULT_LABEL_KEYS = (
    "name",
    "singular_name",
    "add_new",
    "add_new_item",
    "edit_item",
    "new_item",
    "view_item",
    "search_items",
    "not_found",
    "not_found_in_trash",
    "parent_item_colon",
    "all_items",
    "menu_name",
)


def name_from_identifier(identifier: str) -> str:
    """``my-book`` -> ``My Book``."""
    return identifier.replace("-", " ").replace("_", " ").title()


def build_default_labels(plural_name: str, singular_name: str) -> Dict[str, str]:
    """Canonical label set built from the plural and singular names."""
    return {
        "name": plural_name,
        "singular_name": singular_name,
        "add_new": "Add New",
        "add_new_item": f"Add New {singular_name}",
        "edit_item": f"Edit {singular_name}",
        "new_item": f"New {singular_name}",
        "view_item": f"View {singular_name}",
        "search_items": f"Search {plural_name}",
        "not_found": f"No {singular_name.lower()} found",
        "not_found_in_trash": f"No {plural_name.lower()} found in Trash",
        "parent_item_colon": "",
        "all_items": f"All {plural_name}",
        "menu_name": plural_name,
    }


def merge_labels(
    defaults: Dict[str, str], overrides: Optional[Mapping[str, str]]
) -> Dict[str, str]:
    """Explicit labels win; defaults fill the remaining keys."""
    if not overrides:
        return dict(defaults)
    return {**defaults, **overrides}
