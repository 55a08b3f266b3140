"""
Moteur d'inventaire de la boutique.

Génération des variantes produit (matrice couleur / taille / origine),
regroupement du stock par produit et réconciliation mensuelle des mouvements.
"""

__version__ = "1.0.0"
