from __future__ import annotations
import os

def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

class Settings:
    ENV: str = os.getenv("ENV", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Metrics
    METRICS_ENABLED: bool = _flag("METRICS_ENABLED", "true")

settings = Settings()
