"""
Explorer configuration and defaults.

Values are read once at session start from `.depscope/config.yaml`. The
grouping key in particular is fixed for the lifetime of a session: the
legend colors and the panel layout are both derived from it.
"""

import logging
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .types import NodeAttribute

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".depscope/config.yaml")

# d3.schemeCategory10
CATEGORY10: List[str] = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]

# Files the loader tries, in order, when handed a directory
GRAPH_FILE_CANDIDATES: List[str] = [
    "data/tgraph.json",
    "tgraph.json",
    ".depscope/graph.json",
]


class ContractPolicy(StrEnum):
    """How `contract` shrinks a selection."""
    PRUNE_ISOLATED = "prune-isolated"
    REWIND = "rewind"


class ExplorerConfig(BaseModel):
    """Session-wide settings for the selection engine."""
    group_by: NodeAttribute = NodeAttribute.TYPE
    search_attributes: List[NodeAttribute] = Field(
        default_factory=lambda: [NodeAttribute.FULL_NAME]
    )
    contract_policy: ContractPolicy = ContractPolicy.PRUNE_ISOLATED
    palette: List[str] = Field(default_factory=lambda: list(CATEGORY10), min_length=1)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("search_attributes")
    @classmethod
    def _dedupe(cls, value: List[NodeAttribute]) -> List[NodeAttribute]:
        return list(dict.fromkeys(value))


def load_config(path: Optional[Path] = None) -> ExplorerConfig:
    """
    Load explorer settings from YAML.

    A missing file yields the defaults. The settings may sit at the top level
    or under an `explorer:` section.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return ExplorerConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {config_path}, got {type(data).__name__}")

    section = data.get("explorer") or data
    try:
        return ExplorerConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e
