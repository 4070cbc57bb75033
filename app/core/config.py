from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CATALOG_PROVIDER: str = "static"  # "static" | "json" | "http"
    CATALOG_JSON_PATH: str = "./data/categories.json"
    CATALOG_URL: str | None = None
    CATALOG_TIMEOUT_SECONDS: float = 10.0

    REGISTRATION_STORE: str = "memory"  # "memory" | "json"
    REGISTRATION_DATA_DIR: str = "./data/registrations"


settings = Settings()
