"""Checks a parsed AI response against the structured record contract."""

from typing import Any

from investor_intake.analysis.exceptions import AnalysisValidationError
from investor_intake.analysis.models import StructuredRecord

REQUIRED_FIELDS = ("name", "investment_amount", "address")


def validate_and_build(data: Any) -> StructuredRecord:
    """Build a StructuredRecord from parsed JSON.

    Every required field must be present and be a string that is non-empty
    after trimming. Values are not coerced or repaired.

    Raises:
        AnalysisValidationError: on any violation.
    """
    if not isinstance(data, dict):
        raise AnalysisValidationError("JSON response must be an object")
    values: dict[str, str] = {}
    for field in REQUIRED_FIELDS:
        if field not in data:
            raise AnalysisValidationError(f"Missing required field: {field}")
        value = data[field]
        if not isinstance(value, str):
            raise AnalysisValidationError(f"'{field}' must be a string")
        if not value.strip():
            raise AnalysisValidationError(f"'{field}' must be a non-empty string")
        values[field] = value
    return StructuredRecord(**values)
