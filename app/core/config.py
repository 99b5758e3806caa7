import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    # App
    env: str = "dev"
    service_name: str = "geo-reference-api"
    log_level: str = "INFO"

    # Reference data (resolved against the working directory at startup)
    data_dir: Path = Path(os.getcwd())
    cities_file: str = "cities.json"
    governments_file: str = "governments.json"

    # Telemetry
    otlp_endpoint: str | None = None  # e.g. http://localhost:4318 (Jaeger OTLP HTTP)


settings = Settings()
