"""Data models for the evaluation toolkit."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PadOptions:
    """Padding applied before n-gram extraction."""

    start: bool = False
    end: bool = False
    value: str = "<S>"


@dataclass
class EvaluationRecord:
    """One candidate/reference pair and its scores."""

    record_id: str
    candidates: list[str]
    reference: str
    scores: dict[str, Optional[float]] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def uses_jackknife(self) -> bool:
        """True when several candidates are scored against the reference."""
        return len(self.candidates) > 1

    def to_dict(self, include_text: bool = True) -> dict:
        """Convert to dictionary for output."""
        result = {
            "id": self.record_id,
            "num_candidates": len(self.candidates),
        }
        if include_text:
            result["candidate"] = (
                self.candidates[0] if len(self.candidates) == 1 else self.candidates
            )
            result["reference"] = self.reference
        result.update(self.scores)
        result["error"] = self.error
        return result
