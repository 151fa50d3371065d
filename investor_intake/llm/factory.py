from typing import ClassVar

from investor_intake.config.settings import Settings
from investor_intake.llm.client_base import BaseChatClient
from investor_intake.llm.example_client_adapter import ExampleClientAdapter
from investor_intake.llm.openai_client_adapter import OpenAIClientAdapter


class ChatClientFactory:
    """Creates the configured chat client and resolves its model name."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseChatClient:
        """Create a chat client from application settings."""
        provider = cls._provider(settings)
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        return OpenAIClientAdapter(
            api_key=cls._setting(provider, "api_key", settings) or "",
            timeout_seconds=cls._setting(provider, "timeout_seconds", settings) or 30,
            base_url=base_url,
        )

    @classmethod
    def resolve_model_name(cls, settings: Settings) -> str:
        provider = cls._provider(settings)
        if provider == "example":
            return "example"
        return cls._setting(provider, "model_name", settings) or ""

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @staticmethod
    def _provider(settings: Settings) -> str:
        return settings.llm_provider.strip().lower()

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.llm_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "llm_openai_compatible_base_url is required for "
                    "llm_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown LLM provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @staticmethod
    def _setting(provider: str, name: str, settings: Settings):  # type: ignore[no-untyped-def]
        return getattr(settings, f"llm_{provider}_{name}", None)
