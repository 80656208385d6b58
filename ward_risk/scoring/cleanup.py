"""
Ward Risk Scores - Merge Suffix Cleanup
Removes duplicate columns left behind by upstream joins.
"""

import pandas as pd
from typing import Dict, List
import logging

logger = logging.getLogger(__name__)


def clean_merge_suffixes(
    table: pd.DataFrame,
    keep_suffix: str = ".x",
    drop_suffix: str = ".y"
) -> pd.DataFrame:
    """
    Restore canonical column names after a join produced suffixed duplicates.

    A '<name><drop_suffix>' column is removed when it duplicates '<name>' or
    '<name><keep_suffix>'. A '<name><keep_suffix>' column is renamed to
    '<name>', unless '<name>' already exists, in which case the non-suffixed
    column wins and the suffixed one is removed. Columns whose suffix has no
    counterpart are left alone.

    Args:
        table: DataFrame to clean (not modified)
        keep_suffix: suffix of the retained duplicate
        drop_suffix: suffix of the discarded duplicate

    Returns:
        New DataFrame with cleaned columns, same rows
    """
    columns = list(table.columns)
    present = set(columns)

    to_drop: List[str] = []
    renames: Dict[str, str] = {}

    for column in columns:
        if not isinstance(column, str):
            continue

        if drop_suffix and column.endswith(drop_suffix):
            canonical = column[:-len(drop_suffix)]
            if canonical in present or f"{canonical}{keep_suffix}" in present:
                to_drop.append(column)

        elif keep_suffix and column.endswith(keep_suffix):
            canonical = column[:-len(keep_suffix)]
            if canonical in present:
                to_drop.append(column)
            elif f"{canonical}{drop_suffix}" in present:
                renames[column] = canonical

    if not to_drop and not renames:
        return table

    if to_drop:
        logger.debug(f"Dropping duplicate columns: {to_drop}")
    if renames:
        logger.debug(f"Restoring canonical names: {renames}")

    return table.drop(columns=to_drop).rename(columns=renames)
