"""Command-line interface for task extraction."""

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from .logging_utils import configure_logging
from .task_extraction.exceptions import InvalidOptionsError
from .task_extraction.models import (
    ExtractionOptions,
    ExtractionResult,
    TaskCategory,
    TaskStatus,
)
from .task_extraction.reporting import format_summary, summarize_extractions
from .task_extraction.samples import SAMPLE_TRANSCRIPTS
from .task_extraction.task_extractor import TaskExtractor


class TaskExtractionCLI:
    """Command-line interface for the task extractor."""

    def __init__(
        self,
        extractor: TaskExtractor | None = None,
        options: ExtractionOptions | None = None,
        json_output: bool = False,
        show_statistics: bool = False,
    ) -> None:
        """
        Initialize the CLI.

        Args:
            extractor: Optional TaskExtractor instance. If None, creates a new one.
            options: Extraction options applied to every input
            json_output: Print one JSON object per extracted task
            show_statistics: Print a summary report after processing
        """
        self._extractor = extractor or TaskExtractor()
        self._options = options or ExtractionOptions()
        self._json_output = json_output
        self._show_statistics = show_statistics
        self._results: list[ExtractionResult] = []

    def process(self, texts: Iterable[str]) -> list[ExtractionResult]:
        """
        Run extraction over texts and print each outcome.

        Blank lines are skipped.

        Args:
            texts: Sentences to process, one task candidate each

        Returns:
            The extraction results that produced a task
        """
        inputs: list[str] = []
        self._results = []

        for raw in texts:
            text = raw.strip()
            if not text:
                continue
            inputs.append(text)

            result = self._extractor.extract_task(text, self._options)
            if result is not None:
                self._results.append(result)
            self._print_outcome(len(inputs), text, result)

        if self._show_statistics:
            print(format_summary(summarize_extractions(inputs, self._results)))

        return self._results

    def _print_outcome(self, index: int, text: str, result: ExtractionResult | None) -> None:
        if self._json_output:
            if result is not None:
                print(json.dumps(result.to_dict()))
            return

        if result is None:
            print(f"[{index}] ❌ {text}")
            return

        task = result.task
        due = task.due_date.date().isoformat() if task.due_date else "no due date"
        confidence_percent = round(result.confidence * 100)
        print(
            f"[{index}] ✅ {text} -> {task.category.value}, {due} ({confidence_percent}%)"
        )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Task Extraction CLI - Extract to-do items from transcript sentences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  voice-tasks "Need to call the doctor tomorrow"      # Extract from arguments
  voice-tasks --file transcript.txt                   # One sentence per line
  cat transcript.txt | voice-tasks --json             # JSON lines from stdin
  voice-tasks --samples --stats                       # Built-in samples + report
  voice-tasks --min-confidence 0.8 --samples          # Stricter threshold
        """,
    )

    parser.add_argument(
        "texts",
        nargs="*",
        metavar="TEXT",
        help="Sentences to extract tasks from (default: read lines from stdin)",
    )

    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Read sentences from a text file, one per line",
    )

    parser.add_argument(
        "--samples",
        action="store_true",
        help="Run over the built-in sample transcript sentences",
    )

    parser.add_argument(
        "--min-confidence",
        type=float,
        default=None,
        metavar="SCORE",
        help="Minimum confidence (0-1) required to report a task (default: 0.3)",
    )

    parser.add_argument(
        "--default-category",
        choices=[category.value for category in TaskCategory],
        default=None,
        help="Category used when no keyword matches (default: other)",
    )

    parser.add_argument(
        "--default-status",
        choices=[status.value for status in TaskStatus],
        default=None,
        help="Status assigned to extracted tasks (default: pending)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per extracted task",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print extraction statistics after processing",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging and debug information",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace logging (most verbose, includes date pattern matching)",
    )

    return parser


def build_options(args: argparse.Namespace) -> ExtractionOptions:
    """
    Build extraction options from parsed arguments.

    Raises:
        InvalidOptionsError: If the supplied values are out of range
    """
    return ExtractionOptions.from_mapping(
        {
            "min_confidence": args.min_confidence,
            "default_category": args.default_category,
            "default_status": args.default_status,
        }
    )


def read_input_texts(args: argparse.Namespace) -> list[str]:
    """
    Collect input sentences from arguments, a file, the samples, or stdin.

    Raises:
        OSError: If the input file cannot be read
    """
    if args.samples:
        return list(SAMPLE_TRANSCRIPTS)
    if args.file is not None:
        return args.file.read_text(encoding="utf-8").splitlines()
    if args.texts:
        return list(args.texts)
    return sys.stdin.read().splitlines()


def cli_entry_with_args(argv: list[str] | None = None) -> None:
    """CLI entry point with argument parsing."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, trace=args.trace)

    try:
        options = build_options(args)
    except InvalidOptionsError as e:
        parser.error(str(e))

    try:
        texts = read_input_texts(args)
    except OSError as e:
        logging.error(f"Could not read input: {e}")
        print(f"❌ Could not read input: {e}")
        sys.exit(1)

    cli = TaskExtractionCLI(options=options, json_output=args.json, show_statistics=args.stats)
    try:
        cli.process(texts)
    except KeyboardInterrupt:
        pass  # Graceful shutdown


if __name__ == "__main__":
    cli_entry_with_args()
