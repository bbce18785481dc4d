"""Batch evaluation pipeline: score candidate/reference pairs from a file."""

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from tqdm import tqdm

from .config import EvaluationConfig, MetricName
from .data import OutputWriter, load_records
from .errors import InvalidInputError
from .metrics import rouge_l, rouge_n, rouge_s
from .models import EvaluationRecord
from .utils import arithmetic_mean, jackknife

logger = logging.getLogger(__name__)

ScoreFn = Callable[[str, str], float]


class EvaluationPipeline:
    """
    Main pipeline for batch ROUGE evaluation.

    Loads candidate/reference pairs, scores each with the enabled
    metrics, writes one row per record and reports mean scores.
    """

    def __init__(self, config: EvaluationConfig):
        """
        Initialize the pipeline.

        Args:
            config: Pipeline configuration.
        """
        self.config = config
        self.scorers: dict[str, ScoreFn] = self._create_scorers()
        self.summary: dict[str, float] = {}

    def _create_scorers(self) -> dict[str, ScoreFn]:
        """Bind each enabled metric to its configured options."""
        metrics = self.config.metrics
        factories: dict[MetricName, ScoreFn] = {
            "rouge_n": partial(rouge_n, config=metrics.rouge_n),
            "rouge_s": partial(rouge_s, config=metrics.rouge_s),
            "rouge_l": partial(rouge_l, config=metrics.rouge_l),
        }
        return {name: factories[name] for name in metrics.enabled}

    def score_record(self, record: EvaluationRecord) -> EvaluationRecord:
        """
        Score one record with every enabled metric.

        Several candidates are combined with the jackknife estimate.

        Args:
            record: Record to score (updated in place).

        Returns:
            The scored record.

        Raises:
            InvalidInputError: If the record cannot be scored and
                skip_errors is disabled.
        """
        try:
            if not record.candidates:
                raise InvalidInputError("Record has no candidates")
            for name, scorer in self.scorers.items():
                if record.uses_jackknife:
                    record.scores[name] = jackknife(record.candidates, record.reference, scorer)
                else:
                    record.scores[name] = scorer(record.candidates[0], record.reference)
        except InvalidInputError as e:
            if not self.config.processing.skip_errors:
                raise
            logger.warning(f"Skipping record {record.record_id}: {e}")
            record.scores = {name: None for name in self.scorers}
            record.error = str(e)
        return record

    def run(self) -> int:
        """
        Execute the full pipeline.

        Returns:
            Number of records scored.
        """
        if self.config.input_file is None:
            raise ValueError("Input file is required")

        logger.info("Starting evaluation pipeline")
        logger.info(f"Metrics: {', '.join(self.scorers)}")

        records = load_records(self.config.input_file, self.config.input)

        with OutputWriter(
            self.config.output_path,
            format=self.config.output.format,
            include_text=self.config.output.include_text,
        ) as writer:
            for record in tqdm(
                records,
                desc="Scoring",
                disable=not self.config.processing.show_progress,
            ):
                writer.write_record(self.score_record(record))

        self.summary = self._summarize(records)
        for name, value in self.summary.items():
            logger.info(f"Mean {name}: {value:.4f}")

        logger.info(f"Results written to {self.config.output_path}")
        return len(records)

    def _summarize(self, records: list[EvaluationRecord]) -> dict[str, float]:
        """Compute the mean of each metric over successfully scored records."""
        summary = {}
        for name in self.scorers:
            values = [r.scores[name] for r in records if r.scores.get(name) is not None]
            if values:
                summary[name] = arithmetic_mean(values)
        return summary


def run_pipeline(config: EvaluationConfig, input_file: Optional[str | Path] = None) -> dict[str, float]:
    """
    Run the evaluation pipeline and return the mean scores.

    Args:
        config: Pipeline configuration.
        input_file: Optional override for config.input_file.

    Returns:
        Mapping of metric name to mean score.
    """
    if input_file is not None:
        config.input_file = Path(input_file)
    pipeline = EvaluationPipeline(config)
    pipeline.run()
    return pipeline.summary
