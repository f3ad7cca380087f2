"""
Loader for content type provider entries stored in YAML.

The file holds either a list of entries or a mapping of identifier -> entry.
In the mapping form ``postTypeName`` defaults to the mapping key.

Example (mapping form)::

    book:
      autoload: true
      config:
        pluralName: Books
        singularName: Book
        args:
          public: true
          hierarchical: false
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import structlog
import yaml
from pydantic import ValidationError

from content_type_hub.config.schema import ProviderEntry
from content_type_hub.domain.content_types.exceptions import InvalidConfiguration

logger = structlog.get_logger(__name__)


def _normalize_entries(raw: Any, source: str) -> List[Dict[str, Any]]:
    if raw is None:
        return []

    if isinstance(raw, list):
        return [dict(item or {}) for item in raw]

    if isinstance(raw, dict):
        entries = []
        for name, item in raw.items():
            entry = dict(item or {})
            entry.setdefault("postTypeName", name)
            entries.append(entry)
        return entries

    raise InvalidConfiguration(
        f"Content types file must hold a list or a mapping, got {type(raw).__name__}: "
        f"{source}"
    )


def load_content_type_entries(path: Union[str, Path]) -> List[ProviderEntry]:
    """
    Load and validate provider entries from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated ProviderEntry objects, in file order

    Raises:
        InvalidConfiguration: If the file is missing, unparsable or invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise InvalidConfiguration(f"Content types file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(
            "configuration.yaml_parse_error", config_path=str(config_path), error=str(e)
        )
        raise InvalidConfiguration(f"Invalid YAML in content types file: {e}") from e

    try:
        entries = [
            ProviderEntry.model_validate(entry)
            for entry in _normalize_entries(raw, str(config_path))
        ]
    except (ValidationError, TypeError, ValueError) as e:
        if isinstance(e, InvalidConfiguration):
            raise
        logger.error(
            "configuration.validation_failed", config_path=str(config_path), error=str(e)
        )
        raise InvalidConfiguration(
            f"Content types file validation failed: {e}"
        ) from e

    logger.info(
        "configuration.loaded",
        config_path=str(config_path),
        content_types=[entry.post_type_name for entry in entries],
    )
    return entries
