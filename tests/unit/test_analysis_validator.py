"""Tests for structured record validation."""

import pytest

from investor_intake.analysis.exceptions import AnalysisValidationError
from investor_intake.analysis.models import StructuredRecord
from investor_intake.analysis.validator import validate_and_build


def _valid_data() -> dict[str, object]:
    return {"name": "Jane Doe", "investment_amount": "$50,000", "address": "1 Main St"}


class TestValidPayloads:
    def test_builds_record(self) -> None:
        assert validate_and_build(_valid_data()) == StructuredRecord(
            name="Jane Doe", investment_amount="$50,000", address="1 Main St"
        )

    def test_ignores_extra_fields(self) -> None:
        data = {**_valid_data(), "email": "jane@example.com"}
        assert validate_and_build(data).name == "Jane Doe"

    def test_keeps_values_unmodified(self) -> None:
        data = {**_valid_data(), "name": " Jane Doe "}
        assert validate_and_build(data).name == " Jane Doe "


class TestInvalidPayloads:
    @pytest.mark.parametrize("field", ["name", "investment_amount", "address"])
    def test_missing_field(self, field: str) -> None:
        data = _valid_data()
        del data[field]
        with pytest.raises(AnalysisValidationError, match=f"Missing required field: {field}"):
            validate_and_build(data)

    @pytest.mark.parametrize("field", ["name", "investment_amount", "address"])
    def test_blank_field(self, field: str) -> None:
        data = {**_valid_data(), field: "   "}
        with pytest.raises(AnalysisValidationError, match="non-empty"):
            validate_and_build(data)

    def test_non_string_field(self) -> None:
        data = {**_valid_data(), "investment_amount": 50000}
        with pytest.raises(AnalysisValidationError, match="must be a string"):
            validate_and_build(data)

    def test_null_field(self) -> None:
        data = {**_valid_data(), "address": None}
        with pytest.raises(AnalysisValidationError, match="must be a string"):
            validate_and_build(data)

    def test_non_object(self) -> None:
        with pytest.raises(AnalysisValidationError, match="must be an object"):
            validate_and_build(["Jane Doe"])
