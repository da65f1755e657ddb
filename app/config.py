from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Deutsch Lernen Core"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Groq AI (empty key = generation disabled, fallbacks only)
    GROQ_API_KEY: str = ""
    GROQ_MODEL: str = "llama-3.1-8b-instant"
    GENERATION_TIMEOUT_SECONDS: float = 20.0

    # Per-operation generation options
    QUIZ_TEMPERATURE: float = 0.7
    QUIZ_MAX_TOKENS: int = 1000
    DEFINITION_TEMPERATURE: float = 0.3
    DEFINITION_MAX_TOKENS: int = 150
    PARAGRAPH_TEMPERATURE: float = 0.7
    PARAGRAPH_MAX_TOKENS: int = 500

    # Progress
    QUIZ_ESTIMATED_QUESTIONS_PER_ATTEMPT: int = 10  # used when attempts carry no question count

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()
