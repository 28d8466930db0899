"""Rule evaluation for start/end date pairs.

Exports:
- validate / evaluate_dates: pure evaluator returning a ValidationResult
- DATE_RULES: the ordered ordering/range rules
- ValidationContext / build_context: immutable context and its factory
- DateValidationError / FormatScope / describe_error: error taxonomy
"""

from date_range_validation.validation.context import (
    INITIAL_CONTEXT,
    ValidationContext,
    build_context,
)
from date_range_validation.validation.rules import (
    DATE_RULES,
    DateRule,
    check_formats,
    evaluate_dates,
    validate,
)
from date_range_validation.validation.types import (
    ERROR_MESSAGES,
    NO_ERROR,
    DateValidationError,
    FieldStatus,
    FormatScope,
    ValidationResult,
    describe_error,
)

__all__ = [
    "DATE_RULES",
    "DateRule",
    "DateValidationError",
    "ERROR_MESSAGES",
    "FieldStatus",
    "FormatScope",
    "INITIAL_CONTEXT",
    "NO_ERROR",
    "ValidationContext",
    "ValidationResult",
    "build_context",
    "check_formats",
    "describe_error",
    "evaluate_dates",
    "validate",
]
