"""Pydantic schemas for crimes and their outcomes."""

from datetime import date
from typing import Annotated, Literal

from pydantic import Field, field_validator

from policeuk.schemas.base import ValueObject, text_or_empty


class CrimeCategory(ValueObject):
    """A crime category; ``url`` is the slug used in queries."""

    url: str
    name: str


class Street(ValueObject):
    id: int
    name: str


class Location(ValueObject):
    """An approximate street location attached to a crime."""

    kind: Literal["located"] = "located"
    latitude: float
    longitude: float
    street: Street


class UnknownLocation(ValueObject):
    """Textual location of a crime that could not be mapped."""

    kind: Literal["unknown"] = "unknown"
    title: str = ""
    type: str = ""
    subtype: str = ""

    _empty = field_validator("title", "type", "subtype", mode="before")(text_or_empty)


CrimeLocation = Annotated[Location | UnknownLocation, Field(discriminator="kind")]


class StreetLocation(ValueObject):
    """Location of a street-level crime, including the location type (Force/BTP)."""

    type: str = ""
    subtype: str = ""
    latitude: float
    longitude: float
    street: Street

    _empty = field_validator("type", "subtype", mode="before")(text_or_empty)


class OutcomeStatus(ValueObject):
    """Latest outcome recorded against a crime."""

    category: str
    date: date  # first of the month


class Crime(ValueObject):
    """A crime record; ``location`` is either a Location or an UnknownLocation."""

    id: int
    persistent_id: str = ""
    category: str
    context: str = ""
    month: date  # first of the month
    location: CrimeLocation
    outcome_status: OutcomeStatus | None = None

    _empty = field_validator("persistent_id", "context", mode="before")(text_or_empty)


class StreetCrime(ValueObject):
    """A crime returned by the street-level query."""

    id: int
    persistent_id: str
    category: str
    context: str = ""
    month: date  # first of the month
    location: StreetLocation
    outcome_status: OutcomeStatus | None = None

    _empty = field_validator("context", mode="before")(text_or_empty)


class OutcomeCategory(ValueObject):
    code: str
    name: str


class OutcomeItem(ValueObject):
    """One step in the history of a crime's outcomes."""

    category: OutcomeCategory
    date: date  # first of the month
    person_id: str | None = None


class Outcome(ValueObject):
    """A crime together with every outcome recorded against it."""

    crime: Crime
    outcomes: tuple[OutcomeItem, ...] = ()
