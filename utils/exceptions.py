EMAIL_ALREADY_EXISTS_MESSAGE = "The email already exists in the database"
CANDIDATE_NOT_FOUND_MESSAGE = "No se pudo encontrar el registro del candidato"
DATABASE_CONNECTION_MESSAGE = "No se pudo conectar con la base de datos"


class CandidateValidationError(ValueError):
    """
    Raised when a candidate payload fails a field check.
    The message always starts with the fixed prefix for its category, e.g. "Invalid name".
    """

    def __init__(self, category: str, message: str):
        super().__init__(message)
        self.category = category
        self.message = message


class PersistenceError(Exception):
    """Storage failure with a known domain meaning, rewritten to a fixed message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(Exception):
    """Any other storage failure, carrying the backend's original message."""
