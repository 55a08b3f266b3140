"""
Exceptions personnalisées pour le module de gestion des stocks.
"""


class StockException(Exception):
    """Classe de base pour les exceptions liées au stock."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidPaginationException(StockException):
    """Levée lorsque les paramètres de pagination sont invalides."""
    def __init__(self, page: int, size: int):
        self.page = page
        self.size = size
        super().__init__(f"Pagination invalide: page={page}, size={size}")
