"""
Ward Risk Scores - Settings
Loads the covariate catalogue and turns loose run options into typed selections.
"""

import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union
import logging

from ward_risk.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parent / "config"
CONFIG_FILE = "covariates.yaml"

REQUIRED_KEYS = ("data_sources", "settlement_type_column", "naming", "merge_suffixes")

TRUTHY_STRINGS = {"yes"}


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load the covariate catalogue.

    Args:
        config_path: Directory holding covariates.yaml, or the file itself.
            None = the catalogue shipped with the package.

    Returns:
        Parsed configuration dict
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_DIR

    path = Path(config_path)
    if path.is_dir():
        path = path / CONFIG_FILE

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    with open(path, 'r') as f:
        config = yaml.safe_load(f) or {}

    missing = [key for key in REQUIRED_KEYS if key not in config]
    if missing:
        raise ConfigurationError(f"{path} is missing keys: {', '.join(missing)}")

    logger.debug(f"Loaded {len(config['data_sources'])} data sources from {path}")
    return config


def parse_flag(value: Any) -> bool:
    """Interpret a run flag such as "Yes"/"yes"/True; anything else is False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_STRINGS


@dataclass(frozen=True)
class CovariateSelection:
    """Which covariates the caller wants scored."""

    sources: Tuple[str, ...] = field(default_factory=tuple)
    include_settlement_type: bool = False
    include_tpr: bool = False
    tpr_column: Optional[str] = None

    @classmethod
    def from_sources(
        cls,
        sources: Union[Mapping[str, Any], Iterable[str]],
        include_settlement_type: bool = False,
        include_tpr: bool = False,
        tpr_column: Optional[str] = None
    ) -> "CovariateSelection":
        """Build a selection; a mapping (e.g. raster paths) contributes its keys."""
        return cls(
            sources=tuple(sources),
            include_settlement_type=include_settlement_type,
            include_tpr=include_tpr,
            tpr_column=tpr_column,
        )

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "CovariateSelection":
        """
        Build a selection from loose run options.

        Recognised keys: sources (or raster_paths), include_settlement_type,
        include_u5_tpr_data, tpr_data_col_name. Flags may be strings
        like "Yes".
        """
        sources = options.get('sources')
        if sources is None:
            sources = options.get('raster_paths') or ()

        return cls.from_sources(
            sources,
            include_settlement_type=parse_flag(options.get('include_settlement_type')),
            include_tpr=parse_flag(options.get('include_u5_tpr_data')),
            tpr_column=options.get('tpr_data_col_name'),
        )


def load_selection(path: Union[str, Path]) -> CovariateSelection:
    """Read a YAML run file into a CovariateSelection."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Run file not found: {path}")

    with open(path, 'r') as f:
        options = yaml.safe_load(f) or {}

    if not isinstance(options, dict):
        raise ConfigurationError(f"{path} must contain a mapping of run options")

    return CovariateSelection.from_dict(options)
