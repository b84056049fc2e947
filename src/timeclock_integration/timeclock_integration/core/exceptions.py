class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when a required integration setting is missing."""


class RemoteServiceError(Exception):
    """Base exception for failures talking to the remote time clock service."""


class DomainFault(RemoteServiceError):
    """Business rule rejection returned by the remote service (SOAP fault)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(RemoteServiceError):
    """Connectivity or protocol failure."""


class InternalError(RemoteServiceError):
    """Remote call succeeded but returned nothing usable."""


class ParsingError(Exception):
    """Raised when a day in the range has no entry in the remote response."""
