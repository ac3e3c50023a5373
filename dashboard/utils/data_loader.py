"""
Data Loading Utilities
Olympic History Report

Reads the athlete-events and 100m world-record CSV files into DataFrames.
Only column presence is checked; malformed numeric cells become NaN.
"""

import logging
import os
from typing import List, Tuple

import pandas as pd

from config.olympics_config import AnalysisConfig, NUMERIC_COLUMNS, REQUIRED_COLUMNS

logger = logging.getLogger(__name__)


class DataLoadError(ValueError):
    """Raised when an input file is absent or has an incompatible schema."""


# ============================================================================
# FILE READING
# ============================================================================

def _read_table(path: str, required: List[str], label: str) -> pd.DataFrame:
    """Read a CSV file and check that the required columns are present."""
    if not os.path.exists(path):
        raise DataLoadError(f"{label} file not found: {path}")

    try:
        df = pd.read_csv(path, encoding='utf-8-sig')
    except pd.errors.EmptyDataError as exc:
        raise DataLoadError(f"{label} file is empty: {path}") from exc

    missing = [col for col in required if col not in df.columns]
    if missing:
        raise DataLoadError(
            f"{label} file {path} is missing required columns: {', '.join(missing)}"
        )

    return df


def _coerce_numeric(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    for col in columns:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors='coerce')
    return df


# ============================================================================
# MAIN DATA LOADERS
# ============================================================================

def load_athlete_events(path: str) -> pd.DataFrame:
    """
    Load historical Olympic athlete records.

    One row per (athlete, event, Games). Missing ages and medals are NaN;
    the literal 'NA' used by the source file is read as missing.
    """
    df = _read_table(path, REQUIRED_COLUMNS['athlete_events'], 'Athlete events')
    df = _coerce_numeric(df, NUMERIC_COLUMNS['athlete_events'])

    logger.info(f"Loaded {len(df):,} athlete event rows from {path}")
    return df


def load_world_records(path: str) -> pd.DataFrame:
    """
    Load the men's 100m world-record progression.

    The Date column is left as text; record_intervals() parses it with the
    configured date format.
    """
    df = _read_table(path, REQUIRED_COLUMNS['world_records'], 'World records')
    df = _coerce_numeric(df, NUMERIC_COLUMNS['world_records'])

    logger.info(f"Loaded {len(df)} world record rows from {path}")
    return df


def load_all(config: AnalysisConfig) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Load both source tables from the configured paths."""
    events = load_athlete_events(config.athlete_events_path)
    records = load_world_records(config.world_records_path)
    return events, records
