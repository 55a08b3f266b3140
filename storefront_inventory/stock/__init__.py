"""
Module stock.

Consultation du stock par variante, regroupée par produit et triée par
urgence de réapprovisionnement (rupture, stock bas, puis nom).
"""
