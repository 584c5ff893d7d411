"""Custom exceptions for navedit."""


class NaveditError(Exception):
    """Base exception for navedit operations."""


class GatewayError(NaveditError):
    """Error talking to the navigation service."""


class UnavailableError(GatewayError):
    """The navigation service could not be reached."""


class ServerError(GatewayError):
    """The navigation service answered with a failure status."""

    def __init__(self, status: int, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"Server error: {status} - {reason}")


class ContractViolationError(NaveditError, ValueError):
    """The caller broke the engine's input contract."""


class CrossGroupMoveError(ContractViolationError):
    """A move was requested between two different sibling groups."""


class MoveIndexError(ContractViolationError, IndexError):
    """A move index is outside the sibling group."""


class InvalidGroupKeyError(ContractViolationError):
    """A sibling group key could not be parsed."""


class TreeShapeError(ContractViolationError):
    """Navigation data is malformed or nested deeper than two levels."""
