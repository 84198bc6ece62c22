"""Error kinds raised by the exchange services and settled by the controllers."""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_IDENTIFIER = "InvalidIdentifier"
    NETWORK_ERROR = "NetworkError"
    SERVER_REJECTED = "ServerRejected"
    MALFORMED_RESPONSE = "MalformedResponse"
    PRECONDITION_VIOLATION = "PreconditionViolation"
    DELIVERY_FAILED = "DeliveryFailed"


# HTTP status used by the local web surface for each failure kind
HTTP_STATUS = {
    ErrorKind.INVALID_IDENTIFIER: 400,
    ErrorKind.PRECONDITION_VIOLATION: 400,
    ErrorKind.SERVER_REJECTED: 502,
    ErrorKind.MALFORMED_RESPONSE: 502,
    ErrorKind.NETWORK_ERROR: 504,
    ErrorKind.DELIVERY_FAILED: 500,
}


class ExchangeError(Exception):
    """Base class for every failure the client knows how to settle."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdentifier(ExchangeError):
    kind = ErrorKind.INVALID_IDENTIFIER


class NetworkError(ExchangeError):
    kind = ErrorKind.NETWORK_ERROR


class ServerRejected(ExchangeError):
    kind = ErrorKind.SERVER_REJECTED

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(ExchangeError):
    kind = ErrorKind.MALFORMED_RESPONSE


class PreconditionViolation(ExchangeError):
    """Raised to the caller before any state change or request."""

    kind = ErrorKind.PRECONDITION_VIOLATION


class DeliveryFailed(ExchangeError):
    kind = ErrorKind.DELIVERY_FAILED
