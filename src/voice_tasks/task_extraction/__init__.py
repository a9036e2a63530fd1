"""Task extraction module for turning transcript sentences into tasks."""

from .exceptions import DateParseError, InvalidOptionsError, TaskExtractionError
from .models import (
    ExtractionOptions,
    ExtractionResult,
    Task,
    TaskCategory,
    TaskStatus,
)
from .reporting import ExtractionSummary, summarize_extractions
from .task_extractor import TaskExtractor, extract_task

__all__ = [
    "Task",
    "TaskStatus",
    "TaskCategory",
    "ExtractionResult",
    "ExtractionOptions",
    "ExtractionSummary",
    "TaskExtractor",
    "extract_task",
    "summarize_extractions",
    "TaskExtractionError",
    "DateParseError",
    "InvalidOptionsError",
]
