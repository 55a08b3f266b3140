"""
Module catalog.

Référentiel en lecture seule des valeurs d'attributs (couleurs, tailles,
origines) utilisées pour construire les variantes.
"""

from .models import AttributeAxis, AttributeValue, AttributeCatalog

__all__ = [
    'AttributeAxis',
    'AttributeValue',
    'AttributeCatalog',
]
