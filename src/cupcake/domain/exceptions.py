"""Domain-level exceptions.

All order and submission errors are subclasses of DomainException so the
application and CLI layers can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EncodeFailure(DomainException):
    """An order could not be serialized to the wire format."""


class MalformedPayload(DomainException):
    """A payload did not match the order wire schema."""


class TransportError(DomainException):
    """No usable response body could be obtained from the order endpoint."""
