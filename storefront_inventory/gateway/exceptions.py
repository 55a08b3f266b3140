"""Exceptions levées lors des échanges avec le backend REST."""

from typing import Optional


class BackendGatewayException(Exception):
    """Classe de base pour les erreurs de communication avec le backend."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class BackendUnavailableException(BackendGatewayException):
    """Levée lorsque le backend ne répond pas (timeout, connexion refusée)."""
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Backend injoignable sur {path}: {reason}")


class BackendResponseException(BackendGatewayException):
    """Levée lorsque le backend répond avec un statut d'erreur ou un corps inattendu."""
    def __init__(self, path: str, status_code: int, detail: Optional[str] = None):
        self.path = path
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Réponse invalide du backend sur {path} (HTTP {status_code}): {detail or 'sans détail'}")
