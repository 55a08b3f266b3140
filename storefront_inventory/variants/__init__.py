"""
Module variants.

Génération de la matrice des variantes vendables à partir des attributs
de vente d'un produit, suggestion de SKU et validation avant persistance.
"""

from .service import (
    build_matrix,
    generate_sku,
    validate_variants,
    ensure_persistable,
    detect_selling_axes,
    resolve_selling_axes,
)
from .utils import parse_selling_attributes, build_selling_attributes

__all__ = [
    'build_matrix',
    'generate_sku',
    'validate_variants',
    'ensure_persistable',
    'detect_selling_axes',
    'resolve_selling_axes',
    'parse_selling_attributes',
    'build_selling_attributes',
]
