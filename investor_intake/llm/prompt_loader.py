import json
from pathlib import Path

from investor_intake.llm.exceptions import PromptLoadError


def load_prompt_template(path: Path) -> str:
    """Load a prompt template with ``str.format`` placeholders.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path) -> dict[str, object]:
    """Load and parse a JSON schema file.

    Raises:
        PromptLoadError: if the file cannot be read or is not a JSON object.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load JSON schema: {exc}") from exc
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PromptLoadError(f"JSON schema is not valid JSON: {exc}") from exc
    if not isinstance(schema, dict):
        raise PromptLoadError("JSON schema must be an object")
    return schema
