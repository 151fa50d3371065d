"""AI-powered extraction of investor fields from document text."""

import json
from pathlib import Path

from investor_intake.analysis.base import BaseAnalyzer
from investor_intake.analysis.exceptions import (
    AnalysisEmptyResponseError,
    AnalysisValidationError,
)
from investor_intake.analysis.models import StructuredRecord
from investor_intake.analysis.validator import validate_and_build
from investor_intake.llm.client_base import BaseChatClient
from investor_intake.llm.prompt_loader import load_json_schema, load_prompt_template
from investor_intake.logging.logger import Log

_PROMPT_DIR = Path(__file__).parent / "prompts"
DEFAULT_PROMPT_PATH = _PROMPT_DIR / "analysis_prompt.txt"
DEFAULT_SCHEMA_PATH = _PROMPT_DIR / "analysis_schema.json"


class StructuredAnalyzer(BaseAnalyzer):
    """Extracts a StructuredRecord from document text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path or DEFAULT_PROMPT_PATH)
        self._json_schema = load_json_schema(json_schema_path or DEFAULT_SCHEMA_PATH)

    async def analyze(self, text: str) -> StructuredRecord:
        prompt = self._build_prompt(text)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        record = validate_and_build(self._parse_json(raw_response))
        Log.info(f"Analysis complete: extracted record for '{record.name}'")
        return record

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            document_text=text,
            json_schema=json.dumps(self._json_schema, indent=2),
        )

    @staticmethod
    def _parse_json(raw: str) -> object:
        cleaned = raw.strip()
        if not cleaned:
            raise AnalysisEmptyResponseError("AI returned an empty response")
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines).strip()

        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisValidationError(f"Invalid JSON response: {exc}") from exc
