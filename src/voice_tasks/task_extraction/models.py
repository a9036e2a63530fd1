"""Data models for task extraction functionality."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .config import DEFAULT_CATEGORY, DEFAULT_MIN_CONFIDENCE, DEFAULT_STATUS
from .exceptions import InvalidOptionsError


class TaskStatus(str, Enum):
    """Task status enumeration."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskCategory(str, Enum):
    """Task category enumeration, declared in matching priority order."""

    HEALTH = "health"
    WORK = "work"
    PERSONAL = "personal"
    SHOPPING = "shopping"
    OTHER = "other"


@dataclass
class Task:
    """Represents a task extracted from a sentence."""

    id: str
    task_text: str
    due_date: datetime | None
    status: TaskStatus
    category: TaskCategory
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "task_text": self.task_text,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "status": self.status.value,
            "category": self.category.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Result of a successful task extraction."""

    task: Task
    confidence: float
    source_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "task": self.task.to_dict(),
            "confidence": self.confidence,
            "source_text": self.source_text,
        }


@dataclass(frozen=True)
class ExtractionOptions:
    """Per-call configuration for task extraction."""

    min_confidence: float = DEFAULT_MIN_CONFIDENCE
    default_category: TaskCategory = TaskCategory(DEFAULT_CATEGORY)
    default_status: TaskStatus = TaskStatus(DEFAULT_STATUS)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ExtractionOptions":
        """
        Build options from a plain mapping.

        Missing or None values fall back to the defaults. Enum fields accept
        either enum members or their string values.

        Args:
            values: Mapping with any of min_confidence, default_category,
                default_status

        Returns:
            Validated ExtractionOptions

        Raises:
            InvalidOptionsError: If a key is unknown or a value is invalid
        """
        unknown = set(values) - {"min_confidence", "default_category", "default_status"}
        if unknown:
            raise InvalidOptionsError(f"Unknown extraction options: {sorted(unknown)}")

        defaults = cls()
        try:
            min_confidence = values.get("min_confidence")
            category = values.get("default_category")
            status = values.get("default_status")
            options = cls(
                min_confidence=(
                    defaults.min_confidence
                    if min_confidence is None
                    else float(min_confidence)
                ),
                default_category=(
                    defaults.default_category if category is None else TaskCategory(category)
                ),
                default_status=(
                    defaults.default_status if status is None else TaskStatus(status)
                ),
            )
        except (TypeError, ValueError) as e:
            raise InvalidOptionsError(f"Invalid extraction options: {e}") from e

        return options.validate()

    def validate(self) -> "ExtractionOptions":
        """
        Check option values.

        Returns:
            The options themselves, so calls can be chained

        Raises:
            InvalidOptionsError: If any value is out of range or of the wrong type
        """
        if isinstance(self.min_confidence, bool) or not isinstance(
            self.min_confidence, (int, float)
        ):
            raise InvalidOptionsError(
                f"min_confidence must be a number, got {self.min_confidence!r}"
            )
        if not 0.0 <= self.min_confidence <= 1.0:
            raise InvalidOptionsError(
                f"min_confidence must be within [0, 1], got {self.min_confidence}"
            )
        if not isinstance(self.default_category, TaskCategory):
            raise InvalidOptionsError(
                f"default_category must be a TaskCategory, got {self.default_category!r}"
            )
        if not isinstance(self.default_status, TaskStatus):
            raise InvalidOptionsError(
                f"default_status must be a TaskStatus, got {self.default_status!r}"
            )
        return self
