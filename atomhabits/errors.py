"""Error types of the storage, domain and HTTP layers."""

from __future__ import annotations

from http import HTTPStatus

from .models import PostgrestResponse


class InfrastructureError(Exception):
    """Failure while setting up or talking to the database."""


class DatabaseError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("DATABASE_ERROR")


class DotEnvError(InfrastructureError):
    """A required environment variable is missing."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"DOTENV_ERROR: environment variable not found: {variable}")
        self.variable = variable


class DomainError(Exception):
    """Failure in a domain service."""


class PostgrestError(DomainError):
    """PostgREST answered with an error object instead of data."""

    def __init__(self, response: PostgrestResponse) -> None:
        super().__init__(f"POSTGREST_ERROR: {response!r}")
        self.response = response


_WRAPPED = (
    (DomainError, "DOMAIN_ERROR"),
    (InfrastructureError, "INFRASTRUCTURE_ERROR"),
    (OSError, "IO_ERROR"),
)


class ApiError(Exception):
    """An error that the HTTP layer turns into a response."""

    _status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, description: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.description = description

    def status_code(self) -> HTTPStatus:
        return self._status

    @classmethod
    def wrap(cls, error: BaseException) -> ApiError:
        """Turn a lower-layer error into an ApiError; ApiErrors pass through."""
        if isinstance(error, ApiError):
            return error
        for kind, prefix in _WRAPPED:
            if isinstance(error, kind):
                wrapped = ApiError(f"{prefix}: {error}", str(error))
                wrapped.__cause__ = error
                return wrapped
        raise TypeError(f"cannot convert {type(error).__name__} into an ApiError")


class NotFound(ApiError):
    _status = HTTPStatus.NOT_FOUND

    def __init__(self, what: str) -> None:
        super().__init__(f"NOT_FOUND: {what}", what)


class AlreadyExists(ApiError):
    _status = HTTPStatus.BAD_REQUEST

    def __init__(self, what: str) -> None:
        super().__init__(f"ALREADY_EXISTS: {what}", what)


class InvalidParams(ApiError):
    _status = HTTPStatus.BAD_REQUEST

    def __init__(self) -> None:
        super().__init__("INVALID_PARAMS", "Invalid parameters")


class ServiceError(ApiError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__("SERVICE_ERROR", detail)