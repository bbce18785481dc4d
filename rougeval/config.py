"""Configuration management for ROUGE metrics and batch evaluation."""

from pathlib import Path
from typing import Any, Callable, Literal, Optional, TypeVar

import yaml
from pydantic import BaseModel, Field, field_validator

from .text import segment, tokenize
from .utils import lcs, n_gram, skip_bigram

MetricName = Literal["rouge_n", "rouge_s", "rouge_l"]

ConfigT = TypeVar("ConfigT", bound=BaseModel)


class RougeNConfig(BaseModel):
    """Options for ROUGE-N."""

    n: int = Field(default=1, ge=1)
    ngram_fn: Callable[..., list[str]] = Field(default=n_gram, exclude=True)
    tokenizer_fn: Callable[[str], list[str]] = Field(default=tokenize, exclude=True)


class RougeSConfig(BaseModel):
    """Options for ROUGE-S (skip-bigram co-occurrence)."""

    beta: float = Field(default=0.5, ge=0.0)
    skip_bigram_fn: Callable[[list[str]], list[str]] = Field(
        default=skip_bigram, exclude=True
    )
    tokenizer_fn: Callable[[str], list[str]] = Field(default=tokenize, exclude=True)


class RougeLConfig(BaseModel):
    """Options for ROUGE-L (summary-level LCS)."""

    beta: float = Field(default=0.5, ge=0.0)
    lcs_fn: Callable[[list[str], list[str]], list[str]] = Field(default=lcs, exclude=True)
    segmenter_fn: Callable[[str], list[str]] = Field(default=segment, exclude=True)
    tokenizer_fn: Callable[[str], list[str]] = Field(default=tokenize, exclude=True)


def merge_options(
    config_cls: type[ConfigT],
    config: Optional[ConfigT] = None,
    **options: Any,
) -> ConfigT:
    """Overlay keyword overrides on a config (or on the defaults).

    The merged values are validated again, so an invalid override raises
    a pydantic ValidationError.

    Args:
        config_cls: Config model to build
        config: Optional base configuration
        **options: Field overrides

    Returns:
        New validated config instance
    """
    if config is None and not options:
        return config_cls()
    base = dict(config) if config is not None else {}
    return config_cls(**{**base, **options})


class MetricsConfig(BaseModel):
    """Which metrics the batch pipeline computes, and their options."""

    enabled: list[MetricName] = Field(
        default_factory=lambda: ["rouge_n", "rouge_s", "rouge_l"], min_length=1
    )
    rouge_n: RougeNConfig = Field(default_factory=RougeNConfig)
    rouge_s: RougeSConfig = Field(default_factory=RougeSConfig)
    rouge_l: RougeLConfig = Field(default_factory=RougeLConfig)


class InputConfig(BaseModel):
    """Configuration for reading candidate/reference pairs."""

    candidate_column: str = "candidate"
    reference_column: str = "reference"
    id_column: Optional[str] = "id"


class OutputConfig(BaseModel):
    """Configuration for output options."""

    format: Literal["csv", "json"] = "csv"
    include_text: bool = True


class ProcessingConfig(BaseModel):
    """Configuration for processing options."""

    show_progress: bool = True
    skip_errors: bool = Field(
        default=False,
        description="Log and skip records with invalid input instead of aborting",
    )


class EvaluationConfig(BaseModel):
    """Main configuration for the batch evaluation pipeline."""

    input_file: Optional[Path] = None
    output_path: Path = Path("output/scores.csv")
    input: InputConfig = Field(default_factory=InputConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)

    @field_validator("input_file", "output_path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "EvaluationConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
