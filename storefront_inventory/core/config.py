import logging
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Charger les variables d'environnement AVANT de définir la classe Settings
load_dotenv()


class Settings(BaseSettings):
    """Configuration globale de l'application."""

    # --- Application ---
    APP_NAME: str = "Storefront Inventory API"
    LOG_LEVEL: str = "INFO"
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = [
        "http://localhost:4200",
        "http://127.0.0.1:4200",
    ]

    # --- Backend REST (source des données) ---
    BACKEND_BASE_URL: str = "http://localhost:8088/api/v1"
    BACKEND_TIMEOUT_SECONDS: float = 10.0
    BACKEND_API_TOKEN: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

if not settings.BACKEND_API_TOKEN:
    logger.warning("BACKEND_API_TOKEN n'est pas défini: les appels au backend partiront sans authentification.")

logger.info(f"Configuration chargée: backend={settings.BACKEND_BASE_URL}, timeout={settings.BACKEND_TIMEOUT_SECONDS}s")
