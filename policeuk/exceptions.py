"""Exception hierarchy for policeuk.

Every error carries a message naming the failed operation, an optional
``code`` mirrored from the underlying cause and the cause itself as
``__cause__``. Errors can be caught by kind (transport, decode, mapping)
or by the service that raised them.
"""

import httpx


class PoliceUKError(Exception):
    """Base exception for all policeuk errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)

    @classmethod
    def wrap(cls, message: str, cause: BaseException) -> "PoliceUKError":
        """Build an error for ``cause``, mirroring its HTTP status code if it has one.

        Raise the result with ``raise ... from cause`` to chain the cause.
        """
        code = None
        if isinstance(cause, httpx.HTTPStatusError):
            code = cause.response.status_code
        return cls(message, code=code)


# Kinds


class TransportError(PoliceUKError):
    """The GET request failed or returned a non-2xx status."""


class DecodeError(PoliceUKError):
    """The response body was not valid JSON."""


class MappingError(PoliceUKError):
    """The decoded JSON did not have the expected shape or values."""


# Domains


class ForceServiceError(PoliceUKError):
    """Base exception for the forces endpoints."""


class CrimeServiceError(PoliceUKError):
    """Base exception for the crime endpoints."""


class NeighbourhoodServiceError(PoliceUKError):
    """Base exception for the neighbourhood endpoints."""


class StopAndSearchServiceError(PoliceUKError):
    """Base exception for the stop and search endpoints."""


class ForceNotFound(ForceServiceError, TransportError):
    pass


class ForceDecodeError(ForceServiceError, DecodeError):
    pass


class ForceMappingError(ForceServiceError, MappingError):
    pass


class CrimeNotFound(CrimeServiceError, TransportError):
    pass


class CrimeDecodeError(CrimeServiceError, DecodeError):
    pass


class CrimeMappingError(CrimeServiceError, MappingError):
    pass


class NeighbourhoodNotFound(NeighbourhoodServiceError, TransportError):
    pass


class NeighbourhoodDecodeError(NeighbourhoodServiceError, DecodeError):
    pass


class NeighbourhoodMappingError(NeighbourhoodServiceError, MappingError):
    pass


class StopAndSearchNotFound(StopAndSearchServiceError, TransportError):
    pass


class StopAndSearchDecodeError(StopAndSearchServiceError, DecodeError):
    pass


class StopAndSearchMappingError(StopAndSearchServiceError, MappingError):
    pass
