"""Summary statistics over a batch of task extractions."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .models import ExtractionResult, TaskCategory


@dataclass
class ExtractionSummary:
    """Aggregate view of extraction results for a batch of inputs."""

    total_inputs: int
    tasks_extracted: int
    with_due_date: int
    average_confidence: float
    category_counts: dict[TaskCategory, int] = field(default_factory=dict)

    @property
    def extraction_rate(self) -> float:
        """Fraction of inputs that produced a task."""
        if self.total_inputs == 0:
            return 0.0
        return self.tasks_extracted / self.total_inputs


def summarize_extractions(
    inputs: Sequence[str], results: Sequence[ExtractionResult]
) -> ExtractionSummary:
    """
    Summarize extraction results.

    Args:
        inputs: Every text that was submitted for extraction
        results: The non-None results produced for those inputs

    Returns:
        ExtractionSummary with a count for every category, including zeros
    """
    category_counts = {category: 0 for category in TaskCategory}
    for result in results:
        category_counts[result.task.category] += 1

    average_confidence = (
        sum(result.confidence for result in results) / len(results) if results else 0.0
    )

    return ExtractionSummary(
        total_inputs=len(inputs),
        tasks_extracted=len(results),
        with_due_date=sum(1 for result in results if result.task.due_date is not None),
        average_confidence=average_confidence,
        category_counts=category_counts,
    )


def format_summary(summary: ExtractionSummary) -> str:
    """Render a summary as a short multi-line report."""
    lines = [
        "Extraction Statistics:",
        f"  Total inputs: {summary.total_inputs}",
        f"  Tasks extracted: {summary.tasks_extracted} ({summary.extraction_rate:.0%})",
        f"  With due date: {summary.with_due_date}",
        f"  Average confidence: {summary.average_confidence:.2f}",
        "  Category distribution:",
    ]
    lines.extend(
        f"    {category.value}: {count}" for category, count in summary.category_counts.items()
    )
    return "\n".join(lines)
