"""Offline chat client.

Returns canned answers without any network call. Selected with
``LLM_PROVIDER=example`` for local runs and end-to-end tests, and a starting
point when adding a new provider: implement BaseChatClient and register the
provider in ChatClientFactory.
"""

import json
from typing import ClassVar

from investor_intake.llm.client_base import BaseChatClient


class ExampleClientAdapter(BaseChatClient):
    """Answers structured requests with a fixed record and free-text requests with a fixed body."""

    DEFAULT_RECORD: ClassVar[dict[str, str]] = {
        "name": "Jane Doe",
        "investment_amount": "$50,000",
        "address": "1 Main St",
    }
    DEFAULT_TEXT: ClassVar[str] = (
        "Thank you for your investment. A member of our team will be in touch "
        "shortly to walk you through the next steps."
    )

    def __init__(
        self,
        record: dict[str, str] | None = None,
        text: str | None = None,
    ) -> None:
        self._record = dict(record) if record is not None else dict(self.DEFAULT_RECORD)
        self._text = text if text is not None else self.DEFAULT_TEXT

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        if json_schema is not None:
            return json.dumps(self._record)
        return self._text
