"""Score table writer for the batch pipeline."""

import logging
from pathlib import Path
from typing import Literal, Union

import pandas as pd

from ..models import EvaluationRecord

logger = logging.getLogger(__name__)


class OutputWriter:
    """Collects one row per scored record and writes them as a table.

    Rows are written when the writer is flushed (on leaving the ``with``
    block). Records that failed scoring keep a row with empty scores and
    their error message.
    """

    def __init__(
        self,
        output_path: Union[str, Path],
        format: Literal["csv", "json"] = "csv",
        include_text: bool = True,
    ):
        self.output_path = Path(output_path)
        self.format = format
        self.include_text = include_text
        self.rows: list[dict] = []
        self.failed = 0

        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def write_record(self, record: EvaluationRecord) -> None:
        self.rows.append(record.to_dict(include_text=self.include_text))
        if record.error is not None:
            self.failed += 1

    def flush(self) -> None:
        """Write the score table, one row per record in input order.

        JSON output is a list of objects; missing scores become null.
        """
        if not self.rows:
            logger.warning("No records scored, nothing written")
            return

        table = pd.DataFrame(self.rows)
        if self.format == "csv":
            table.to_csv(self.output_path, index=False)
        else:
            table.to_json(self.output_path, orient="records", indent=2, force_ascii=False)

        logger.debug(
            f"Wrote {len(self.rows)} rows ({self.failed} failed) to {self.output_path}"
        )

    def __enter__(self) -> "OutputWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.flush()
