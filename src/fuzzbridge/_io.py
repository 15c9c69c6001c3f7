"""Shared I/O helpers."""

from typing import List

import pandas as pd


def read_csv(file_path: str) -> pd.DataFrame:
    """Read a CSV file into a DataFrame, keeping every column as text."""
    return pd.read_csv(file_path, dtype=str, keep_default_na=False)


def load_candidates(file_path: str, column: str) -> List[str]:
    """Load one CSV column as a list of candidate strings.

    Empty cells are dropped; duplicates and order are kept.

    Raises:
        ValueError: If the column does not exist.
    """
    df = read_csv(file_path)
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found")
    return [value for value in df[column].tolist() if value != ""]
