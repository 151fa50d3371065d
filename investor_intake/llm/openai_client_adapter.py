import httpx
import openai

from investor_intake.llm.client_base import BaseChatClient
from investor_intake.llm.exceptions import LLMError, LLMNetworkError


class OpenAIClientAdapter(BaseChatClient):
    """Chat client built on the OpenAI-compatible async chat completions API."""

    SCHEMA_NAME = "structured_record"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None = None,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        request: dict[str, object] = {
            "model": model,
            "temperature": temperature,
            "messages": messages,
        }
        if json_schema is not None:
            request["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": self.SCHEMA_NAME,
                    "strict": True,
                    "schema": json_schema,
                },
            }

        try:
            response = await self._client.chat.completions.create(**request)  # type: ignore[call-overload]
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LLMNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise LLMNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise LLMError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LLMError("AI returned empty response")
        return content
