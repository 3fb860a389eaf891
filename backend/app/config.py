from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    DEFAULT_PRESET: str = "direct"
    LOG_LEVEL: str = "INFO"
    EXPORT_FILENAME: str = "partner_projection"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
