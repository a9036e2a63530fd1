"""Configuration constants for task extraction functionality."""

# Extraction defaults
DEFAULT_MIN_CONFIDENCE = 0.3
DEFAULT_CATEGORY = "other"
DEFAULT_STATUS = "pending"

# Confidence scoring
BASE_CONFIDENCE = 0.5
DUE_DATE_BONUS = 0.2
CATEGORY_BONUS = 0.2
VERB_BONUS_PER_MATCH = 0.1
VERB_BONUS_CAP = 0.1
KEYWORD_BONUS_PER_MATCH = 0.05
KEYWORD_BONUS_CAP = 0.1
MAX_CONFIDENCE = 1.0
CONFIDENCE_PRECISION = 2  # decimal places; all weights are multiples of 0.05

# Due date resolution
NEXT_WEEK_DAYS = 7
