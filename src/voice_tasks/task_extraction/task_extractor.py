"""Task extractor for turning transcript sentences into structured tasks."""

import re
from collections.abc import Callable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any
from uuid import uuid4

from voice_tasks.logging_utils import get_logger

from .config import (
    BASE_CONFIDENCE,
    CATEGORY_BONUS,
    CONFIDENCE_PRECISION,
    DUE_DATE_BONUS,
    KEYWORD_BONUS_CAP,
    KEYWORD_BONUS_PER_MATCH,
    MAX_CONFIDENCE,
    VERB_BONUS_CAP,
    VERB_BONUS_PER_MATCH,
)
from .due_dates import extract_due_date
from .exceptions import InvalidOptionsError
from .models import ExtractionOptions, ExtractionResult, Task, TaskCategory

logger = get_logger(__name__)

# "after work", "before lunch": timing phrases, not subject matter
_TIMING_PHRASE = re.compile(
    r"\b(?:after|before)\s+"
    r"(?!(?:the|a|an|my|our|your|his|her|their|its|this|that|next)\b)[a-z]+\b"
)


class TaskExtractor:
    """
    Extracts at most one task per sentence using keyword and pattern matching.

    The extractor holds no per-call state; the only instance attribute is the
    clock used for due-date resolution and timestamps, so one instance can be
    shared freely.
    """

    TASK_VERBS: tuple[str, ...] = (
        "need", "have to", "must", "should", "want to", "plan to",
        "going to", "gonna", "call", "schedule", "book", "make",
        "set up", "arrange", "prepare", "do", "complete", "finish",
        "submit", "send", "write", "create", "organize", "clean",
        "buy", "purchase", "get", "pick up", "drop off",
    )  # fmt: skip

    CATEGORY_KEYWORDS: Mapping[TaskCategory, tuple[str, ...]] = MappingProxyType(
        {
            TaskCategory.HEALTH: (
                "doctor", "appointment", "medical", "health", "checkup",
                "medicine", "pharmacy", "dentist", "hospital", "clinic",
                "therapy", "treatment", "vaccine", "test", "scan",
            ),
            TaskCategory.WORK: (
                "meeting", "deadline", "project", "report", "email",
                "call", "work", "office", "presentation", "document",
                "client", "team", "business", "conference", "interview",
            ),
            TaskCategory.PERSONAL: (
                "family", "friend", "home", "house", "clean",
                "organize", "garden", "pet", "child", "parent",
                "relative", "neighbor", "community", "volunteer",
            ),
            TaskCategory.SHOPPING: (
                "buy", "purchase", "shop", "grocery", "store",
                "market", "mall", "online", "order", "delivery",
                "return", "exchange", "refund", "receipt",
            ),
            TaskCategory.OTHER: (),
        }
    )  # fmt: skip

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        """
        Initialize the task extractor.

        Args:
            clock: Returns the current instant; called once per extraction
        """
        self._clock = clock

    def extract_task(
        self,
        text: str,
        options: ExtractionOptions | Mapping[str, Any] | None = None,
    ) -> ExtractionResult | None:
        """
        Extract a task from a single sentence.

        Args:
            text: Raw sentence, e.g. one line of a transcript
            options: Per-call configuration; defaults apply when omitted

        Returns:
            ExtractionResult, or None when the text is not a task, scores below
            the confidence threshold, or extraction fails
        """
        try:
            resolved = self._resolve_options(options)
            normalized = text.lower().strip()

            matched_verbs = self.find_task_verbs(normalized)
            if not matched_verbs:
                logger.debug(f"No task verb found in '{text}'")
                return None

            now = self._clock()
            due_date = self._extract_due_date(normalized, now)
            category = self.determine_category(normalized, resolved.default_category)
            confidence = self.calculate_confidence(normalized, due_date, category)

            if confidence < resolved.min_confidence:
                logger.debug(
                    f"Confidence {confidence:.2f} below threshold "
                    f"{resolved.min_confidence:.2f} for '{text}'"
                )
                return None

            task = Task(
                id=str(uuid4()),
                task_text=text,
                due_date=due_date,
                status=resolved.default_status,
                category=category,
                created_at=now,
                updated_at=now,
            )

            logger.debug(
                f"Extracted task: category={category.value}, due_date={due_date}, "
                f"confidence={confidence:.2f}, verbs={list(matched_verbs)}"
            )

            return ExtractionResult(task=task, confidence=confidence, source_text=text)

        except Exception as e:
            logger.error(f"Error extracting task: {e}")
            return None

    def find_task_verbs(self, normalized_text: str) -> tuple[str, ...]:
        """Return the task verb phrases contained in the text, in table order."""
        return tuple(verb for verb in self.TASK_VERBS if verb in normalized_text)

    def determine_category(
        self,
        normalized_text: str,
        default_category: TaskCategory = TaskCategory.OTHER,
    ) -> TaskCategory:
        """
        Determine the category of a task from its text.

        Categories are scanned in priority order (health, work, personal,
        shopping); the first with any keyword in the text wins.

        Args:
            normalized_text: Lower-cased, trimmed text
            default_category: Category used when no keyword matches

        Returns:
            The determined category
        """
        try:
            subject = self._subject_text(normalized_text)
            for category, keywords in self.CATEGORY_KEYWORDS.items():
                if any(keyword in subject for keyword in keywords):
                    return category
            return default_category
        except Exception as e:
            logger.error(f"Error determining category: {e}")
            return default_category

    def calculate_confidence(
        self,
        normalized_text: str,
        due_date: datetime | None,
        category: TaskCategory,
    ) -> float:
        """
        Calculate a heuristic confidence score for an extraction.

        Args:
            normalized_text: Lower-cased, trimmed text
            due_date: Extracted due date, if any
            category: Determined category

        Returns:
            Score between 0 and 1
        """
        try:
            score = BASE_CONFIDENCE

            if due_date is not None:
                score += DUE_DATE_BONUS

            if category is not TaskCategory.OTHER:
                score += CATEGORY_BONUS

            verb_count = len(self.find_task_verbs(normalized_text))
            score += min(verb_count * VERB_BONUS_PER_MATCH, VERB_BONUS_CAP)

            subject = self._subject_text(normalized_text)
            keyword_count = sum(
                1 for keyword in self.CATEGORY_KEYWORDS[category] if keyword in subject
            )
            score += min(keyword_count * KEYWORD_BONUS_PER_MATCH, KEYWORD_BONUS_CAP)

            return round(min(score, MAX_CONFIDENCE), CONFIDENCE_PRECISION)
        except Exception as e:
            logger.error(f"Error calculating confidence: {e}")
            return 0.0

    def _extract_due_date(self, normalized_text: str, now: datetime) -> datetime | None:
        try:
            return extract_due_date(normalized_text, now)
        except Exception as e:
            logger.error(f"Error extracting due date: {e}")
            return None

    @staticmethod
    def _subject_text(normalized_text: str) -> str:
        return _TIMING_PHRASE.sub(" ", normalized_text)

    @staticmethod
    def _resolve_options(
        options: ExtractionOptions | Mapping[str, Any] | None,
    ) -> ExtractionOptions:
        if options is None:
            return ExtractionOptions()
        if isinstance(options, ExtractionOptions):
            return options.validate()
        if isinstance(options, Mapping):
            return ExtractionOptions.from_mapping(options)
        raise InvalidOptionsError(
            f"Options must be ExtractionOptions or a mapping, got {type(options).__name__}"
        )


_default_extractor = TaskExtractor()


def extract_task(
    text: str,
    options: ExtractionOptions | Mapping[str, Any] | None = None,
) -> ExtractionResult | None:
    """Extract a task from text with a shared default extractor."""
    return _default_extractor.extract_task(text, options)
