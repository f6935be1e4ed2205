"""policeuk: typed async client for the data.police.uk open data API."""

from policeuk.client import PoliceUK
from policeuk.config import Settings, get_settings
from policeuk.exceptions import (
    CrimeServiceError,
    DecodeError,
    ForceServiceError,
    MappingError,
    NeighbourhoodServiceError,
    PoliceUKError,
    StopAndSearchServiceError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "PoliceUK",
    "Settings",
    "get_settings",
    "PoliceUKError",
    "TransportError",
    "DecodeError",
    "MappingError",
    "ForceServiceError",
    "CrimeServiceError",
    "NeighbourhoodServiceError",
    "StopAndSearchServiceError",
]
