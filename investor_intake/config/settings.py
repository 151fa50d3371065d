from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    min_text_length: int = 20

    llm_provider: str = "openai"

    llm_openai_api_key: str = ""
    llm_openai_model_name: str = "gpt-4o-mini"
    llm_openai_timeout_seconds: int = 30

    llm_openai_compatible_api_key: str = ""
    llm_openai_compatible_model_name: str = ""
    llm_openai_compatible_base_url: str = ""
    llm_openai_compatible_timeout_seconds: int = 30

    llm_openrouter_api_key: str = ""
    llm_openrouter_model_name: str = ""
    llm_openrouter_timeout_seconds: int = 30

    llm_groq_api_key: str = ""
    llm_groq_model_name: str = ""
    llm_groq_timeout_seconds: int = 30

    llm_together_api_key: str = ""
    llm_together_model_name: str = ""
    llm_together_timeout_seconds: int = 30

    llm_deepseek_api_key: str = ""
    llm_deepseek_model_name: str = ""
    llm_deepseek_timeout_seconds: int = 30

    llm_ollama_api_key: str = "ollama"
    llm_ollama_model_name: str = ""
    llm_ollama_timeout_seconds: int = 60

    analysis_temperature: float = 0.0
    drafting_temperature: float = 0.5

    # URL (http/https) or filesystem path; empty means the bundled watchlist.csv
    watchlist_source: str = ""
    watchlist_timeout_seconds: int = 10
    watchlist_failure_policy: Literal["fail", "flag", "approve"] = "fail"
