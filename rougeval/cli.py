"""Command-line interface for ROUGE evaluation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import EvaluationConfig, RougeLConfig, RougeNConfig, RougeSConfig
from .metrics import rouge_l, rouge_n, rouge_s
from .pipeline import EvaluationPipeline
from .text import segment, tokenize


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        description="ROUGE summary evaluation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score a single pair
  rougeval score "police kill the gunman" "police killed the gunman" --beta 1

  # Inspect preprocessing
  rougeval tokenize "They'll save and invest more."
  rougeval segment "Hello World. My name is Jonas."

  # Batch evaluation from a config file
  rougeval evaluate --config config.yaml --input data/pairs.jsonl
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    score_parser = subparsers.add_parser("score", help="Score one candidate against one reference")
    score_parser.add_argument("candidate", help="Candidate summary")
    score_parser.add_argument("reference", help="Reference summary")
    score_parser.add_argument(
        "--metric",
        choices=["n", "s", "l", "all"],
        default="all",
        help="Metric to compute (default: all)",
    )
    score_parser.add_argument("--n", type=int, default=1, help="N-gram size for ROUGE-N (default: 1)")
    score_parser.add_argument(
        "--beta",
        type=float,
        default=0.5,
        help="F-measure beta for ROUGE-S/L (default: 0.5, > 1 returns recall)",
    )
    add_common_arguments(score_parser)

    tokenize_parser = subparsers.add_parser("tokenize", help="Print the tokens of a sentence")
    tokenize_parser.add_argument("text", help="Sentence to tokenize")
    add_common_arguments(tokenize_parser)

    segment_parser = subparsers.add_parser("segment", help="Print the sentences of a document")
    segment_parser.add_argument("text", help="Document to segment")
    add_common_arguments(segment_parser)

    evaluate_parser = subparsers.add_parser("evaluate", help="Score pairs from a file")
    setup_evaluate_parser(evaluate_parser)
    add_common_arguments(evaluate_parser)

    return parser


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_evaluate_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for evaluate command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input file (.jsonl, .json or .csv)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Path to output file",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "json"],
        help="Output format (default: csv)",
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Skip records with invalid input instead of aborting",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress progress bars",
    )


def build_config(args: argparse.Namespace) -> EvaluationConfig:
    """Build configuration from arguments."""
    if args.config:
        config = EvaluationConfig.from_yaml(args.config)
    else:
        config = EvaluationConfig()

    if args.input:
        config.input_file = args.input
    if args.output:
        config.output_path = args.output
    if args.format:
        config.output.format = args.format
    if args.skip_errors:
        config.processing.skip_errors = True
    if args.quiet:
        config.processing.show_progress = False

    return config


def handle_score(args: argparse.Namespace) -> int:
    """Handle score command."""
    metrics = {
        "n": ("ROUGE-N", lambda: rouge_n(args.candidate, args.reference, RougeNConfig(n=args.n))),
        "s": ("ROUGE-S", lambda: rouge_s(args.candidate, args.reference, RougeSConfig(beta=args.beta))),
        "l": ("ROUGE-L", lambda: rouge_l(args.candidate, args.reference, RougeLConfig(beta=args.beta))),
    }
    selected = metrics.keys() if args.metric == "all" else [args.metric]
    for key in selected:
        label, compute = metrics[key]
        print(f"{label}: {compute():.4f}")
    return 0


def handle_evaluate(args: argparse.Namespace) -> int:
    """Handle evaluate command."""
    config = build_config(args)

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    pipeline = EvaluationPipeline(config)
    record_count = pipeline.run()
    print(f"\nScored {record_count} records")
    for name, value in pipeline.summary.items():
        print(f"  {name}: {value:.4f}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.command == "score":
            return handle_score(args)
        if args.command == "tokenize":
            print("\n".join(tokenize(args.text)))
            return 0
        if args.command == "segment":
            print("\n".join(segment(args.text)))
            return 0
        return handle_evaluate(args)
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        logging.exception("Evaluation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
