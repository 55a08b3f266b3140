"""
Constantes pour le module de gestion des stocks.
"""

# Groupe des articles sans produit parent
UNASSIGNED_PRODUCT_ID = 0
UNASSIGNED_PRODUCT_NAME = "Không xác định"

# Libellé d'une variante sans attribut
DEFAULT_VARIANT_LABEL = "Mặc định"

# Libellés de statut de l'écran de stock
STOCK_STATUS_LABELS = {
    "NORMAL": "Còn hàng",
    "LOW": "Sắp hết",
    "OUT_OF_STOCK": "Hết hàng",
}

# Nombre de pages affichées de part et d'autre de la page courante
PAGE_WINDOW = 2
