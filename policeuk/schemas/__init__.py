"""Pydantic value objects for data.police.uk responses."""

from policeuk.schemas.base import ContactDetails
from policeuk.schemas.crimes import (
    Crime,
    CrimeCategory,
    CrimeLocation,
    Location,
    Outcome,
    OutcomeCategory,
    OutcomeItem,
    OutcomeStatus,
    Street,
    StreetCrime,
    StreetLocation,
    UnknownLocation,
)
from policeuk.schemas.forces import EngagementMethod, Force, ForceSummary, SeniorOfficer
from policeuk.schemas.neighbourhoods import (
    BoundaryPoint,
    Centre,
    Event,
    Link,
    LocateResult,
    Neighbourhood,
    NeighbourhoodLocation,
    NeighbourhoodSummary,
    Person,
    Priority,
)
from policeuk.schemas.stop_and_search import Stop

__all__ = [
    "BoundaryPoint",
    "Centre",
    "ContactDetails",
    "Crime",
    "CrimeCategory",
    "CrimeLocation",
    "EngagementMethod",
    "Event",
    "Force",
    "ForceSummary",
    "Link",
    "LocateResult",
    "Location",
    "Neighbourhood",
    "NeighbourhoodLocation",
    "NeighbourhoodSummary",
    "Outcome",
    "OutcomeCategory",
    "OutcomeItem",
    "OutcomeStatus",
    "Person",
    "Priority",
    "SeniorOfficer",
    "Stop",
    "Street",
    "StreetCrime",
    "StreetLocation",
    "UnknownLocation",
]
