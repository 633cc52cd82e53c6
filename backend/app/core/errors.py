"""Failure taxonomy shared by the upstream layer, the facade and the HTTP boundary."""

from __future__ import annotations


class UpstreamError(Exception):
    """Raised by the upstream client and envelope decoding, never rendered directly."""


class TransportFailure(UpstreamError):
    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class DecodeFailure(UpstreamError):
    pass


class EmployeeApiError(Exception):
    status_code: int = 500
    summary: str = "UnexpectedFailure"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailure(EmployeeApiError):
    status_code = 400
    summary = "BadRequest"


class NotFoundFailure(EmployeeApiError):
    status_code = 404
    summary = "NotFound"


class ServiceUnavailable(EmployeeApiError):
    status_code = 503
    summary = "ServiceUnavailable"


class UnexpectedFailure(EmployeeApiError):
    pass
