"""Tests for the batch evaluation pipeline."""

import json

import pandas as pd
import pytest

from rougeval.config import EvaluationConfig, InputConfig
from rougeval.data import OutputWriter, load_records
from rougeval.errors import InvalidInputError
from rougeval.models import EvaluationRecord
from rougeval.pipeline import EvaluationPipeline, run_pipeline

REFERENCE = "police killed the gunman"


def write_jsonl(path, rows):
    with open(path, "w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row) + "\n")


@pytest.fixture
def pairs_file(tmp_path):
    path = tmp_path / "pairs.jsonl"
    write_jsonl(
        path,
        [
            {"id": "a", "candidate": "police kill the gunman", "reference": REFERENCE},
            {"id": "b", "candidate": "the gunman police killed", "reference": REFERENCE},
        ],
    )
    return path


def make_config(tmp_path, input_file, **processing):
    config = EvaluationConfig(
        input_file=input_file,
        output_path=tmp_path / "out" / "scores.csv",
    )
    config.processing.show_progress = False
    for key, value in processing.items():
        setattr(config.processing, key, value)
    return config


class TestLoadRecords:
    """Tests for reading candidate/reference pairs."""

    def test_jsonl(self, pairs_file):
        records = load_records(pairs_file, InputConfig())
        assert [r.record_id for r in records] == ["a", "b"]
        assert records[0].candidates == ["police kill the gunman"]
        assert records[0].reference == REFERENCE

    def test_csv_without_id_column(self, tmp_path):
        path = tmp_path / "pairs.csv"
        pd.DataFrame(
            {"candidate": ["police kill the gunman"], "reference": [REFERENCE]}
        ).to_csv(path, index=False)

        records = load_records(path, InputConfig())

        assert len(records) == 1
        assert records[0].record_id == "0"

    def test_custom_columns(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(path, [{"summary": "a b", "gold": "a c"}])

        records = load_records(path, InputConfig(candidate_column="summary", reference_column="gold"))

        assert records[0].candidates == ["a b"]
        assert records[0].reference == "a c"

    def test_list_candidates(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(path, [{"id": "x", "candidate": ["one two", "three four"], "reference": "one"}])

        records = load_records(path, InputConfig())

        assert records[0].candidates == ["one two", "three four"]
        assert records[0].uses_jackknife

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "pairs.csv"
        pd.DataFrame({"text": ["a"], "summary": ["b"]}).to_csv(path, index=False)
        with pytest.raises(ValueError):
            load_records(path, InputConfig())

    def test_missing_cell_names_row(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(
            path,
            [
                {"id": "a", "candidate": "police kill the gunman", "reference": REFERENCE},
                {"id": "b", "candidate": "nan thing"},
            ],
        )
        with pytest.raises(ValueError, match="Row 1: missing value in column 'reference'"):
            load_records(path, InputConfig())

    def test_null_candidate(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(path, [{"id": "a", "candidate": None, "reference": REFERENCE}])
        with pytest.raises(ValueError, match="Row 0"):
            load_records(path, InputConfig())

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_records(tmp_path / "missing.jsonl", InputConfig())

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "pairs.txt"
        path.write_text("candidate\treference\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_records(path, InputConfig())


class TestOutputWriter:
    """Tests for the output writer."""

    def test_csv_output(self, tmp_path):
        output = tmp_path / "nested" / "scores.csv"
        record = EvaluationRecord("a", ["x y"], "x z", scores={"rouge_n": 0.5})

        with OutputWriter(output) as writer:
            writer.write_record(record)

        df = pd.read_csv(output)
        assert list(df.columns) == ["id", "num_candidates", "candidate", "reference", "rouge_n", "error"]
        assert df["rouge_n"].iloc[0] == 0.5

    def test_json_output_without_text(self, tmp_path):
        output = tmp_path / "scores.json"
        records = [
            EvaluationRecord("a", ["x y"], "x z", scores={"rouge_n": 0.5}),
            EvaluationRecord("b", ["x y"], "x y", scores={"rouge_n": 1.0}),
        ]

        with OutputWriter(output, format="json", include_text=False) as writer:
            for record in records:
                writer.write_record(record)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data[1] == {"id": "b", "num_candidates": 1, "rouge_n": 1.0, "error": None}

    def test_failed_records_counted(self, tmp_path):
        output = tmp_path / "scores.json"
        with OutputWriter(output, format="json") as writer:
            writer.write_record(EvaluationRecord("a", ["x y"], "x z", scores={"rouge_n": 0.5}))
            writer.write_record(
                EvaluationRecord("b", [""], "x z", scores={"rouge_n": None}, error="empty")
            )

        assert writer.failed == 1
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data[1]["rouge_n"] is None
        assert data[1]["error"] == "empty"

    def test_empty_buffer_writes_nothing(self, tmp_path):
        output = tmp_path / "scores.csv"
        with OutputWriter(output):
            pass
        assert not output.exists()


class TestEvaluationPipeline:
    """Tests for EvaluationPipeline."""

    def test_scorers_follow_enabled_metrics(self, tmp_path, pairs_file):
        config = make_config(tmp_path, pairs_file)
        config.metrics.enabled = ["rouge_l"]
        pipeline = EvaluationPipeline(config)
        assert list(pipeline.scorers) == ["rouge_l"]

    def test_run(self, tmp_path, pairs_file):
        config = make_config(tmp_path, pairs_file)
        pipeline = EvaluationPipeline(config)

        assert pipeline.run() == 2

        df = pd.read_csv(config.output_path)
        assert list(df["id"]) == ["a", "b"]
        assert df["rouge_n"].tolist() == pytest.approx([0.75, 1.0])
        assert df["rouge_s"].tolist() == pytest.approx([0.5, 1 / 3])
        assert df["rouge_l"].tolist() == pytest.approx([0.75, 1.0])
        assert pipeline.summary["rouge_n"] == pytest.approx(0.875)

    def test_metric_options_applied(self, tmp_path, pairs_file):
        config = make_config(tmp_path, pairs_file)
        config.metrics.enabled = ["rouge_n"]
        config.metrics.rouge_n.n = 2

        summary = run_pipeline(config)

        # bigrams: 1/3 for "a" and 2/3 for "b"
        assert summary == {"rouge_n": pytest.approx(0.5)}

    def test_jackknife_for_multiple_candidates(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(
            path,
            [{"id": "m", "candidate": ["police kill the gunman", "the gunman police killed"], "reference": REFERENCE}],
        )
        config = make_config(tmp_path, path)
        config.metrics.enabled = ["rouge_n"]
        config.output.format = "json"
        config.output_path = tmp_path / "scores.json"

        EvaluationPipeline(config).run()

        data = json.loads(config.output_path.read_text(encoding="utf-8"))
        assert data[0]["num_candidates"] == 2
        assert data[0]["rouge_n"] == pytest.approx(0.875)

    def test_invalid_record_raises(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(path, [{"id": "bad", "candidate": "", "reference": REFERENCE}])
        config = make_config(tmp_path, path)

        with pytest.raises(InvalidInputError):
            EvaluationPipeline(config).run()

    def test_skip_errors(self, tmp_path):
        path = tmp_path / "mixed.jsonl"
        write_jsonl(
            path,
            [
                {"id": "a", "candidate": "police kill the gunman", "reference": REFERENCE},
                {"id": "bad", "candidate": "", "reference": REFERENCE},
            ],
        )
        config = make_config(tmp_path, path, skip_errors=True)
        config.output.format = "json"

        pipeline = EvaluationPipeline(config)
        assert pipeline.run() == 2

        data = json.loads(config.output_path.read_text(encoding="utf-8"))
        assert data[1]["rouge_n"] is None
        assert "empty" in data[1]["error"]
        assert pipeline.summary["rouge_n"] == pytest.approx(0.75)

    def test_empty_candidate_list_skipped(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(
            path,
            [
                {"id": "a", "candidate": ["police kill the gunman"], "reference": REFERENCE},
                {"id": "none", "candidate": [], "reference": REFERENCE},
            ],
        )
        config = make_config(tmp_path, path, skip_errors=True)
        config.output.format = "json"

        assert EvaluationPipeline(config).run() == 2

        data = json.loads(config.output_path.read_text(encoding="utf-8"))
        assert data[1]["error"] == "Record has no candidates"
        assert data[1]["rouge_l"] is None

    def test_empty_candidate_list_raises(self, tmp_path):
        path = tmp_path / "pairs.jsonl"
        write_jsonl(path, [{"id": "none", "candidate": [], "reference": REFERENCE}])
        config = make_config(tmp_path, path)

        with pytest.raises(InvalidInputError, match="no candidates"):
            EvaluationPipeline(config).run()

    def test_missing_input_file(self, tmp_path):
        config = make_config(tmp_path, None)
        with pytest.raises(ValueError):
            EvaluationPipeline(config).run()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
