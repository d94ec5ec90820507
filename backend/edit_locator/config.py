from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # LLM Provider settings (OpenRouter or OpenAI compatible)
    # For OpenRouter: https://openrouter.ai/api/v1
    # For OpenAI: https://api.openai.com/v1
    llm_api_key: str = ""
    llm_base_url: str = "https://api.openai.com/v1"

    # Search plan generation (only used when an LLM plan is requested)
    model_search_plan: str = "anthropic/claude-sonnet-4.5"
    llm_temperature: float = 0.1
    search_plan_max_tokens: int = 1000

    # Path to the local React projects addressable by name
    projects_base_path: str = "../sample-react-projects"

    # Locate pipeline settings
    locator_use_llm_plan: bool = False  # heuristic search plan by default
    locator_verbose: bool = False

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
