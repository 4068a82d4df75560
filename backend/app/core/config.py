from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Taskdraft API"
    API_V1_PREFIX: str = "/api/v1"

    # LLM providers
    LLM_PROVIDER: str = "openai"  # or "ollama"
    OPENAI_API_KEY: str = ""  # empty disables the model path
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OLLAMA_HOST: str = "http://ollama:11434"
    OLLAMA_MODEL: str = "gemma:2b"
    LLM_TEMPERATURE: float = 0.3
    LLM_MAX_TOKENS: int = 1000
    LLM_TIMEOUT: float = 30.0

    # DB
    DATABASE_URL: str = "sqlite:///./data/taskdraft.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # or "json"

    class Config:
        env_file = ".env"

settings = Settings()
