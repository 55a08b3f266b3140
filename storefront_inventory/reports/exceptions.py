"""
Exceptions personnalisées pour le rapport de rapprochement.
"""


class ReportException(Exception):
    """Classe de base pour les exceptions liées aux rapports."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidReportPeriodException(ReportException):
    """Levée lorsque la période demandée (mois/année) est invalide."""
    def __init__(self, year: int, month: int):
        self.year = year
        self.month = month
        super().__init__(f"Période invalide: {month}/{year} (mois 1-12, année >= 2020)")
