from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    VELGURU_BOT_TOKEN: str | None = None
    WEBHOOK_URL: str | None = None

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    SERVICE_NAME: str = "VelGuru Bot"
    TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"
    TELEGRAM_TIMEOUT_SECONDS: float = 10.0

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
