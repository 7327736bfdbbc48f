"""DataFrame-based statement generation."""

from typing import Any, Dict, List

import pandas as pd

from .binds import Statement
from .errors import MissingArgument
from .query_builder import QueryBuilder


def df_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Rows as dicts with NaN/NaT turned into None."""
    if not isinstance(df, pd.DataFrame):
        raise TypeError('Input must be a pandas DataFrame')
    if df.empty:
        raise MissingArgument('data')
    clean = df.astype(object).where(pd.notna(df), None)
    return clean.to_dict('records')


def df_insert(df: pd.DataFrame, database: str, table: str) -> Statement:
    """Generate a multi-row INSERT from DataFrame rows."""
    qb = QueryBuilder(database, table)
    qb.data.set(df_records(df))
    return qb.insert()


def df_update_bulk(df: pd.DataFrame, database: str, table: str, key_columns: List[str],
                   strict: bool = True, assign: bool = False) -> Statement:
    """Generate a CASE-based bulk UPDATE, one spec per row keyed by key_columns."""
    rows = df_records(df)
    missing = [k for k in key_columns if k not in df.columns]
    if missing:
        raise ValueError(f'Key columns not in DataFrame: {missing}')
    specs = [
        {
            'filter': {k: row[k] for k in key_columns},
            'values': {c: v for c, v in row.items() if c not in key_columns},
        }
        for row in rows
    ]
    qb = QueryBuilder(database, table)
    qb.data.set(specs)
    return qb.update_bulk(strict=strict, assign=assign)
