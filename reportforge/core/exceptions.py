"""
Centralized Exception Hierarchy for ReportForge.

All exceptions inherit from ReportForgeError for easy catching.

Each exception includes:
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable steps to resolve the issue
- error_code: Unique identifier for documentation lookup (e.g., "RF-REC-001")

Formatting itself never raises for publication content: an unknown
publication kind or a missing field degrades to a fallback citation. The
exceptions here cover malformed input records, strict traversal and
configuration.

Exception Hierarchy
-------------------
    ReportForgeError (base)
    ├── TraversalError
    │   └── EventCycleError
    └── ValidationError
        ├── RecordValidationError
        └── ConfigValidationError
"""

import builtins
from typing import Any, List, Optional


class ReportForgeError(Exception):
    """
    Base exception for all ReportForge errors.

    Example
    -------
        try:
            event = load_event(data)
        except ReportForgeError as e:
            logger.error(f"Could not load event: {e}")
            print(f"Fix: {e.how_to_fix}")
    """

    error_code: str = "RF-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        """Initialize ReportForgeError with helpful information.

        Args:
            message: Human-readable error message
            error_code: Unique identifier (e.g., "RF-REC-001")
            why_it_happened: Explanation of root cause
            how_to_fix: List of actionable fix suggestions
        """
        super().__init__(message)

        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix


# ============================================================================
# Traversal Exceptions
# ============================================================================


class TraversalError(ReportForgeError):
    """Base exception for errors while walking an event hierarchy."""

    error_code = "RF-TRV-000"
    why_it_happened = "The event hierarchy could not be traversed"
    how_to_fix = ["Check the sub-event references of the exported event"]


class EventCycleError(TraversalError):
    """
    Raised in strict mode when an event is reachable from itself.

    Attributes
    ----------
    path : list of str
        Identifiers from the cycle entry point back to the repeated event
    """

    error_code = "RF-TRV-001"
    why_it_happened = (
        "A sub-event refers back to one of its ancestors, so the hierarchy "
        "is not a tree"
    )
    how_to_fix = [
        "Fix the has_event references in the source data",
        "Disable strict cycle checking (authors.strict_cycles: false) to "
        "skip repeated events with a warning",
    ]

    def __init__(self, message: str, path: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.path = path or []


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(ReportForgeError):
    """
    Raised when validation fails.

    This can occur when:
    - Configuration is invalid
    - Input records don't meet requirements
    """

    error_code = "RF-VAL-000"
    why_it_happened = "Validation failed for input data or configuration"
    how_to_fix = [
        "Check the error message for specific validation failures",
        "Review the expected format or value constraints",
    ]


class RecordValidationError(ValidationError):
    """
    Raised when an input record cannot be turned into a domain object.

    Attributes
    ----------
    record_type : str
        Kind of record being loaded (Event, Person, Publication, ...)
    errors : list of dict
        Field-level validation errors as reported by pydantic
    """

    error_code = "RF-REC-001"
    why_it_happened = (
        "An input record is missing a required field or has a value of "
        "the wrong type"
    )
    how_to_fix = [
        "Check the field named in the error message",
        "Event and person records need a display_name",
        "Events need an st_id so sub-events can be tracked",
    ]

    def __init__(
        self,
        message: str,
        record_type: Optional[str] = None,
        errors: Optional[List[dict]] = None,
    ) -> None:
        super().__init__(message)
        self.record_type = record_type
        self.errors = errors or []


class ConfigValidationError(ValidationError):
    """
    Raised when configuration validation fails.

    Attributes
    ----------
    field : str
        The configuration field that failed validation
    value : any
        The invalid value
    """

    error_code = "RF-VAL-001"
    why_it_happened = (
        "A configuration value is invalid. "
        "The reportforge.yaml file may have incorrect settings"
    )
    how_to_fix = [
        "Check reportforge.yaml for syntax errors",
        "Verify the value type matches what's expected",
    ]

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        super().__init__(
            message,
            error_code=error_code,
            why_it_happened=why_it_happened,
            how_to_fix=how_to_fix,
        )
        self.field = field
        self.value = value


# ============================================================================
# Error Info Lookup
# ============================================================================


STANDARD_ERROR_INFO: dict[type, dict[str, Any]] = {
    builtins.FileNotFoundError: {
        "error_code": "RF-FILE-001",
        "why_it_happened": "The specified input file could not be found",
        "how_to_fix": [
            "Check that the file path is correct",
            "Ensure you have read permissions for the file",
        ],
    },
    ValueError: {
        "error_code": "RF-VAL-002",
        "why_it_happened": "An invalid value was provided",
        "how_to_fix": [
            "Check the error message for the expected value format",
            "Input files must contain valid JSON",
        ],
    },
}


def get_error_info(exc: BaseException) -> dict[str, Any]:
    """Get helpful error information for any exception.

    Args:
        exc: Exception to get info for

    Returns:
        Dict with error_code, why_it_happened, how_to_fix
    """
    if isinstance(exc, ReportForgeError):
        return {
            "error_code": exc.error_code,
            "why_it_happened": exc.why_it_happened,
            "how_to_fix": exc.how_to_fix,
        }

    for parent_type, info in STANDARD_ERROR_INFO.items():
        if isinstance(exc, parent_type):
            return info

    return {
        "error_code": "RF-ERR-999",
        "why_it_happened": "An unexpected error occurred",
        "how_to_fix": [
            "Check the error message for details",
            "Run again with --verbose for a full traceback",
        ],
    }
