"""
Ward Risk Scores - Covariate Resolution
Maps supplied data-source identifiers to the ward table's covariate columns.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from ward_risk.errors import ConfigurationError
from ward_risk.settings import CovariateSelection, load_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedCovariates:
    """Covariates found in the table plus the extras requested by flags."""

    covariates: Tuple[str, ...] = field(default_factory=tuple)
    extras: Tuple[str, ...] = field(default_factory=tuple)

    def all(self) -> List[str]:
        """Covariates then extras, duplicates removed."""
        return list(dict.fromkeys(self.covariates + self.extras))

    def __len__(self) -> int:
        return len(self.all())


class CovariateResolver:
    """Resolves a CovariateSelection against the data-source catalogue."""

    def __init__(self, config: Optional[Dict] = None, config_path: Optional[Path] = None):
        if config is None:
            config = load_config(config_path)

        self.data_sources: Dict[str, str] = dict(config['data_sources'])
        self.settlement_type_column: str = config['settlement_type_column']

    def map_sources(self, sources: Iterable[str]) -> List[str]:
        """Translate data-source identifiers to column names, skipping unknown ones."""
        names = []
        for source in sources:
            column = self.data_sources.get(source)
            if column is None:
                logger.debug(f"No covariate registered for data source '{source}'")
                continue
            names.append(column)
        return list(dict.fromkeys(names))

    def extras(self, selection: CovariateSelection) -> List[str]:
        """Extra covariate columns requested by the selection's flags."""
        extras = []
        if selection.include_settlement_type:
            extras.append(self.settlement_type_column)
        if selection.include_tpr:
            if not selection.tpr_column:
                raise ConfigurationError(
                    "Test positivity rate requested but no TPR column name was given"
                )
            extras.append(selection.tpr_column)
        return extras

    def resolve(self, columns: Iterable[str], selection: CovariateSelection) -> ResolvedCovariates:
        """
        Resolve the selection against the columns of a ward table.

        Args:
            columns: Column names present in the ward table
            selection: Sources and inclusion flags chosen by the caller

        Returns:
            ResolvedCovariates; extras are not checked against the columns
        """
        present = set(columns)
        mapped = self.map_sources(selection.sources)
        found = [c for c in mapped if c in present]

        skipped = [c for c in mapped if c not in present]
        if skipped:
            logger.info(f"Covariates not in ward table, skipped: {', '.join(skipped)}")

        return ResolvedCovariates(covariates=tuple(found), extras=tuple(self.extras(selection)))


def create_resolver(config_path: Optional[Path] = None) -> CovariateResolver:
    """Factory function."""
    return CovariateResolver(config_path=config_path)
