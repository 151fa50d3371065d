from pathlib import Path

from investor_intake.analysis.models import StructuredRecord
from investor_intake.compliance.models import ComplianceOutcome
from investor_intake.llm.client_base import BaseChatClient
from investor_intake.llm.prompt_loader import load_prompt_template
from investor_intake.logging.logger import Log
from investor_intake.notification.base import BaseDrafter
from investor_intake.notification.exceptions import DraftError
from investor_intake.notification.models import NotificationDraft

_PROMPT_DIR = Path(__file__).parent / "prompts"
DEFAULT_TEMPLATE_PATHS: dict[ComplianceOutcome, Path] = {
    ComplianceOutcome.APPROVED: _PROMPT_DIR / "approved_prompt.txt",
    ComplianceOutcome.FLAGGED: _PROMPT_DIR / "flagged_prompt.txt",
}


class NotificationDrafter(BaseDrafter):
    """Drafts a welcome email (approved) or an internal alert (flagged).

    The approved template only receives the name and investment amount; the
    address is passed to the flagged template alone.
    """

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.5,
        template_paths: dict[ComplianceOutcome, Path] | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        paths = {**DEFAULT_TEMPLATE_PATHS, **(template_paths or {})}
        self._templates = {
            outcome: load_prompt_template(path) for outcome, path in paths.items()
        }

    async def draft(
        self, record: StructuredRecord, outcome: ComplianceOutcome
    ) -> NotificationDraft:
        prompt = self._build_prompt(record, outcome)
        Log.debug(f"Drafting prompt ({outcome.value}):\n{prompt}")

        body = await self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt="",
            user_prompt=prompt,
        )
        body = body.strip()
        if not body:
            raise DraftError("AI returned an empty notification draft")

        Log.info(f"Drafted {outcome.value} notification ({len(body)} chars)")
        return NotificationDraft(body=body, intent=outcome)

    def _build_prompt(self, record: StructuredRecord, outcome: ComplianceOutcome) -> str:
        if outcome is ComplianceOutcome.APPROVED:
            return self._templates[outcome].format(
                name=record.name,
                investment_amount=record.investment_amount,
            )
        if outcome is ComplianceOutcome.FLAGGED:
            return self._templates[outcome].format(
                name=record.name,
                investment_amount=record.investment_amount,
                address=record.address,
            )
        raise DraftError(f"Cannot draft a notification for outcome {outcome!r}")
