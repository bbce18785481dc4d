"""Input and output helpers for batch evaluation."""

from .output_writer import OutputWriter
from .pair_loader import load_records

__all__ = ["OutputWriter", "load_records"]
