"""Example demonstrating task extraction from transcript sentences."""

import logging

from voice_tasks.task_extraction import (
    ExtractionOptions,
    TaskCategory,
    TaskExtractor,
    summarize_extractions,
)
from voice_tasks.task_extraction.reporting import format_summary
from voice_tasks.task_extraction.samples import SAMPLE_TRANSCRIPTS

logging.basicConfig(level=logging.INFO)


def main() -> None:
    """Demonstrate TaskExtractor functionality."""
    extractor = TaskExtractor()

    # Example 1: Extract a single task
    print("=== Extracting a task ===")
    result = extractor.extract_task("I need to call my doctor tomorrow for a checkup")
    print(f"Extraction result: {result.to_dict() if result else None}")
    print()

    # Example 2: A statement is not a task
    print("=== Extracting from a statement ===")
    result = extractor.extract_task("The weather is nice today")
    print(f"Extraction result: {result}")
    print()

    # Example 3: Stricter threshold and a custom default category
    print("=== Extracting with custom options ===")
    options = ExtractionOptions(min_confidence=0.8, default_category=TaskCategory.PERSONAL)
    for text in ("Need to relax", "This is a random statement"):
        result = extractor.extract_task(text, options)
        summary = f"{result.task.category.value} ({result.confidence:.2f})" if result else None
        print(f"{text!r}: {summary}")
    print()

    # Example 4: Statistics over the sample transcripts
    print("=== Sample transcript statistics ===")
    results = [extractor.extract_task(text) for text in SAMPLE_TRANSCRIPTS]
    extracted = [result for result in results if result is not None]
    print(format_summary(summarize_extractions(SAMPLE_TRANSCRIPTS, extracted)))


if __name__ == "__main__":
    main()
