"""
Configuration pour le module de génération des variantes.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class VariantSettings(BaseSettings):
    """Paramètres de génération des SKU de variantes."""

    # SKU utilisé quand le produit parent n'en a pas
    DEFAULT_BASE_SKU: str = "PROD"
    # Suffixe ajouté quand aucun axe ne contribue au SKU
    EMPTY_SKU_SUFFIX: str = "NEW"

    # Limites imposées par le backend sur product_details
    SKU_MAX_LENGTH: int = 100
    PRICE_DECIMAL_PLACES: int = 2

    model_config = SettingsConfigDict(env_prefix="VARIANT_", case_sensitive=True)


settings = VariantSettings()
