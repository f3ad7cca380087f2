"""Helper queries over a content host."""

from typing import Dict, List, Union

from content_type_hub.config.settings import get_settings
from content_type_hub.domain.content_types.protocols import ContentHost


def get_all_supports_for_content_type(
    host: ContentHost, content_type: str, keys_only: bool = False
) -> Union[Dict[str, bool], List[str]]:
    """
    Get all of the supports for the given content type.

    Args:
        host: Host to query
        content_type: Content type to fetch the supports for
        keys_only: Return only the feature names

    Returns:
        Feature -> enabled mapping, or the list of feature names
    """
    supports = host.get_baseline_supports(content_type)
    if keys_only:
        return list(supports)
    return supports


def get_all_content_types(
    host: ContentHost, include_builtin_baseline: bool = False
) -> Dict[str, str]:
    """
    Get the custom content types, optionally with the builtin baseline type.

    Returns:
        Mapping of name -> name, mirroring the host's own listing
    """
    content_types = {name: name for name in host.get_content_types()}

    if include_builtin_baseline:
        baseline = get_settings().baseline_content_type
        content_types[baseline] = baseline

    return content_types
