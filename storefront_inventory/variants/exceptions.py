"""
Exceptions spécifiques au module variants.

Les erreurs de forme (axe de vente sans valeur, axe déclaré deux fois) sont
levées avant toute génération. Les erreurs de validation sont collectées et
ne bloquent que la persistance.
"""

from typing import Iterable, List

from storefront_inventory.catalog.models import AttributeAxis


class VariantMatrixException(Exception):
    """Classe de base pour les exceptions du module variants."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MissingAxisValuesException(VariantMatrixException):
    """Levée lorsqu'un axe de vente est déclaré sans aucune valeur sélectionnée."""
    def __init__(self, axis: AttributeAxis):
        self.axis = axis
        super().__init__(f"L'attribut de vente {axis.value} n'a aucune valeur sélectionnée.")


class ConflictingAxisException(VariantMatrixException):
    """Levée lorsqu'un axe est à la fois attribut de vente et attribut d'affichage."""
    def __init__(self, axes: Iterable[AttributeAxis]):
        self.axes = sorted(axes, key=AttributeAxis.ordered().index)
        names = ", ".join(axis.value for axis in self.axes)
        super().__init__(f"Axe(s) déclaré(s) à la fois en vente et en affichage: {names}.")


class UnknownAttributeValueException(VariantMatrixException):
    """Levée lorsqu'un identifiant de valeur n'existe pas dans le référentiel."""
    def __init__(self, axis: AttributeAxis, value_id: int):
        self.axis = axis
        self.value_id = value_id
        super().__init__(f"Valeur {value_id} inconnue pour l'attribut {axis.value}.")


class InvalidSellingAttributesException(VariantMatrixException):
    """Levée lorsqu'une chaîne d'attributs de vente contient un axe inconnu."""
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Attributs de vente invalides: '{raw}'.")


class VariantValidationException(VariantMatrixException):
    """Levée lorsqu'un jeu de variantes ne peut pas être persisté."""
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Variantes invalides: " + "; ".join(self.errors))
