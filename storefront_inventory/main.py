"""
Module principal de l'application FastAPI du moteur d'inventaire.

Configure l'instance FastAPI, le middleware CORS et inclut les routeurs du
catalogue d'attributs, de la génération des variantes, du stock et du rapport
de rapprochement mensuel.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront_inventory import __version__
from storefront_inventory.core.config import settings

# --- Importer les routeurs ---
from storefront_inventory.catalog.router import router as catalog_router
from storefront_inventory.variants.router import router as variants_router
from storefront_inventory.stock.router import router as stock_router
from storefront_inventory.reports.router import router as reports_router

# Configurer le logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="API de génération des variantes produit, de consultation du stock et de rapprochement mensuel.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# ======================================================
# Inclure les routeurs
# ======================================================
app.include_router(catalog_router, prefix=f"{settings.API_V1_PREFIX}/catalog")
app.include_router(variants_router, prefix=f"{settings.API_V1_PREFIX}/variants")

# Stock et rapport partagent le préfixe /inventory, comme côté backend
app.include_router(stock_router, prefix=f"{settings.API_V1_PREFIX}/inventory")
app.include_router(reports_router, prefix=f"{settings.API_V1_PREFIX}/inventory")


@app.get("/", tags=["Root"])
async def read_root():
    return {"message": f"Bienvenue sur {settings.APP_NAME}", "version": __version__}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront_inventory.main:app", host="0.0.0.0", port=8000)
