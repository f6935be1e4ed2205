"""Services for the data.police.uk endpoints."""

from policeuk.services.crimes import CrimeService
from policeuk.services.forces import ForceService
from policeuk.services.neighbourhoods import NeighbourhoodService
from policeuk.services.stop_and_search import StopAndSearchService

__all__ = ["CrimeService", "ForceService", "NeighbourhoodService", "StopAndSearchService"]
