"""Exceptions raised by the mock registry."""

from werkzeug.exceptions import BadRequest, NotFound, InternalServerError


class DecodeError(ValueError):
    """A document could not be decoded into a :mod:`moat.domain` value."""


class EncodeError(RuntimeError):
    """A value could not be encoded; only raised for non-model objects."""


class ClientInputError(BadRequest):
    """The request body or query string is malformed or incomplete."""


class RecordNotFound(NotFound):
    """No profile is registered under the requested identifier."""


class SimulatedUpstreamError(InternalServerError):
    """Deliberate failure so clients can exercise their error handling."""
