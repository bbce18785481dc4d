"""Load candidate/reference pairs from JSONL, JSON or CSV files."""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from ..config import InputConfig
from ..models import EvaluationRecord

logger = logging.getLogger(__name__)


def read_table(input_path: Path) -> pd.DataFrame:
    """Read an input file into a DataFrame based on its extension.

    Args:
        input_path: Path to a .jsonl, .json or .csv file

    Returns:
        DataFrame with one row per record

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the extension is not supported
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    suffix = input_path.suffix.lower()
    if suffix == ".jsonl":
        return pd.read_json(input_path, lines=True, dtype=False)
    if suffix == ".json":
        return pd.read_json(input_path, dtype=False)
    if suffix == ".csv":
        return pd.read_csv(input_path, dtype=str, keep_default_na=False)
    raise ValueError(f"Unsupported input format: {input_path.suffix}")


def _is_missing(value) -> bool:
    return not isinstance(value, (list, tuple)) and pd.isna(value)


def _as_candidates(value) -> list[str]:
    """Normalise a candidate cell to a list of strings."""
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


def load_records(input_path: Union[str, Path], config: InputConfig) -> list[EvaluationRecord]:
    """Load evaluation records from a file.

    A candidate cell holding a list yields a record with several
    candidates (scored with the jackknife).

    Args:
        input_path: Path to the input file
        config: Column mapping

    Returns:
        List of EvaluationRecord objects in file order

    Raises:
        ValueError: If a required column is missing or a row has no
            value in it
    """
    input_path = Path(input_path)
    logger.info(f"Reading input from: {input_path}")
    df = read_table(input_path)

    required = [config.candidate_column, config.reference_column]
    missing = [column for column in required if column not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    use_ids = config.id_column is not None and config.id_column in df.columns
    records = []
    for row_number, row in enumerate(df.to_dict(orient="records")):
        for column in required:
            if _is_missing(row[column]):
                raise ValueError(f"Row {row_number}: missing value in column '{column}'")

        record_id = str(row[config.id_column]) if use_ids else str(row_number)
        records.append(
            EvaluationRecord(
                record_id=record_id,
                candidates=_as_candidates(row[config.candidate_column]),
                reference=str(row[config.reference_column]),
            )
        )

    logger.info(f"Loaded {len(records)} records")
    return records
