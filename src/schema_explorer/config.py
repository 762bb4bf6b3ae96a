from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field

from schema_explorer import log
from schema_explorer.categories import Category


class ExplorerConfig(BaseModel):
    """Presentation settings for the explorer CLI."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    default_category: Category = Field(Category.QUERY, alias="defaultCategory")
    sort_listings: bool = Field(False, alias="sortListings")
    show_deprecated: bool = Field(True, alias="showDeprecated")
    empty_placeholder: str = Field("-", alias="emptyPlaceholder")


def load_config(config_path: Path | None) -> ExplorerConfig:
    """
    Load and validate the explorer configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file, or None for defaults.

    Returns:
        A validated ExplorerConfig.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file is not valid YAML.
        TypeError: If the YAML root is not a mapping.
        ValidationError: If validation against ExplorerConfig fails.
    """
    if config_path is None:
        log.debug("No explorer config provided, using defaults")
        return ExplorerConfig()

    raw: Any
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    log.debug(f"Loaded explorer config from {config_path}")

    # Empty file or explicit YAML null means defaults
    if raw is None or raw == {}:
        return ExplorerConfig()

    if not isinstance(raw, dict):
        raise TypeError(f"Explorer config root must be a mapping (YAML object), got {type(raw).__name__}")

    return ExplorerConfig.model_validate(cast(dict[str, Any], raw))
