from typing import Any, Dict, List, Optional


class FolioError(Exception):
    """
    Base class for errors raised by the service layer.

    `status_code` is the HTTP status the API layer answers with.
    """
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(FolioError):
    status_code = 400
    default_message = "Validation error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class ConflictError(FolioError):
    status_code = 409
    default_message = "Resource already exists"


class NotFoundError(FolioError):
    status_code = 404
    default_message = "Not found"


class AuthenticationError(FolioError):
    status_code = 401
    default_message = "Unauthorized"


class StorageError(FolioError):
    """Persistence failure. The message is logged, never sent to the client."""
    status_code = 500
