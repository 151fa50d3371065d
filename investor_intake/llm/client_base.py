from abc import ABC, abstractmethod


class BaseChatClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        """Return the provider response as plain text.

        When ``json_schema`` is given the provider is asked for a single JSON
        object conforming to it; otherwise free text is requested.

        Raises:
            LLMNetworkError: on transport or provider API failures.
            LLMError: when the provider answers without usable content.
        """
