"""Environment-driven settings, read once at startup by config/settings.py."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come straight from the process environment; no .env file.
    model_config = SettingsConfigDict(extra="ignore")

    DEBUG: bool = False
    SECRET_KEY: str = "django-insecure-hostdesk-dev-key"
    ALLOWED_HOSTS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # --- Database ---
    # 'sqlite' for local development and tests, 'postgresql' in production
    DB_ENGINE: str = "sqlite"
    DB_NAME: str = "hostdesk.sqlite3"
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = ""
    DB_PORT: str = ""
    STORE_TIMEOUT_SECONDS: float = 5.0

    # --- Identity provider ---
    IDENTITY_VERIFIER: str = "accounts.identity.HttpIdentityVerifier"
    IDENTITY_VERIFY_URL: str = "http://localhost:8000/api/v1/token/validate/"
    IDENTITY_TIMEOUT_SECONDS: float = 2.0

    @property
    def is_postgres(self) -> bool:
        return self.DB_ENGINE == "postgresql"


env = Settings()
