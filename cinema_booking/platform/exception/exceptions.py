from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self, message: str, status_code: int = 500, *, details: dict[str, Any] | None = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(
        self, message: str, status_code: int = 400, *, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, status_code, details=details)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, 409, details=details)


class InfrastructureError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
