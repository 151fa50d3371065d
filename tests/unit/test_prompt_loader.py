"""Tests for prompt template and JSON schema loading."""

from pathlib import Path

import pytest

from investor_intake.analysis.analyzer import DEFAULT_PROMPT_PATH, DEFAULT_SCHEMA_PATH
from investor_intake.llm.exceptions import PromptLoadError
from investor_intake.llm.prompt_loader import load_json_schema, load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_bundled_analysis_template(self) -> None:
        template = load_prompt_template(DEFAULT_PROMPT_PATH)
        assert "{document_text}" in template
        assert "{json_schema}" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {document_text}")
        assert load_prompt_template(custom) == "Hello {document_text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(PromptLoadError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    def test_loads_bundled_schema(self) -> None:
        schema = load_json_schema(DEFAULT_SCHEMA_PATH)
        assert schema["required"] == ["name", "investment_amount", "address"]
        assert schema["additionalProperties"] is False

    def test_loads_custom_schema(self, tmp_path: Path) -> None:
        custom = tmp_path / "schema.json"
        custom.write_text('{"type": "object"}')
        assert load_json_schema(custom) == {"type": "object"}

    def test_invalid_json_raises_error(self, tmp_path: Path) -> None:
        custom = tmp_path / "schema.json"
        custom.write_text("{not json")
        with pytest.raises(PromptLoadError, match="not valid JSON"):
            load_json_schema(custom)

    def test_non_object_schema_raises_error(self, tmp_path: Path) -> None:
        custom = tmp_path / "schema.json"
        custom.write_text("[]")
        with pytest.raises(PromptLoadError, match="must be an object"):
            load_json_schema(custom)

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(PromptLoadError, match="Failed to load JSON schema"):
            load_json_schema(Path("/nonexistent/schema.json"))
