"""
Configuration pour le module de gestion des stocks.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class StockSettings(BaseSettings):
    """Paramètres de configuration pour la gestion des stocks."""

    # Seuil "stock bas", partagé par l'écran de stock et le rapport mensuel
    LOW_STOCK_THRESHOLD: int = 5

    # Paramètres de pagination (par produit, après regroupement)
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Taille de la page demandée au backend: tout est récupéré puis regroupé ici
    FETCH_SIZE: int = 1000

    model_config = SettingsConfigDict(env_prefix="STOCK_", case_sensitive=True)


settings = StockSettings()
