"""Error taxonomy shared by the store and the request handlers.

Each error carries the HTTP status the app shell answers with and a
message that is safe to show to the client.
"""


class TaskError(Exception):
    status_code = 500
    message = "Erreur serveur"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(TaskError):
    status_code = 400
    message = "Données invalides"


class InvalidIdentifierError(TaskError):
    status_code = 400
    message = "Identifiant invalide"


class NotFoundError(TaskError):
    status_code = 404
    message = "Tâche introuvable"


class StoreError(TaskError):
    """The database is unavailable or rejected the operation."""

    status_code = 500
    message = "Erreur serveur"
