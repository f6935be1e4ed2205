"""Pydantic schemas for neighbourhoods and their policing teams."""

from datetime import datetime

from pydantic import field_validator

from policeuk.schemas.base import ContactDetails, ValueObject, text_or_empty


class NeighbourhoodSummary(ValueObject):
    id: str
    name: str


class Centre(ValueObject):
    latitude: float | None = None
    longitude: float | None = None


class Link(ValueObject):
    title: str = ""
    url: str = ""
    description: str = ""

    _empty = field_validator("*", mode="before")(text_or_empty)


class NeighbourhoodLocation(ValueObject):
    """A police station or other public location within a neighbourhood."""

    name: str = ""
    type: str = ""
    telephone: str = ""
    address: str = ""
    postcode: str = ""
    latitude: float | None = None
    longitude: float | None = None
    description: str = ""

    _empty = field_validator(
        "name", "type", "telephone", "address", "postcode", "description", mode="before"
    )(text_or_empty)


class Neighbourhood(ValueObject):
    """Full details of a neighbourhood."""

    id: str
    name: str
    force_url: str = ""
    description: str = ""
    population: int
    contact_details: ContactDetails = ContactDetails()
    centre: Centre = Centre()
    links: tuple[Link, ...] = ()
    locations: tuple[NeighbourhoodLocation, ...] = ()

    _empty = field_validator("force_url", "description", mode="before")(text_or_empty)


class Priority(ValueObject):
    """A policing priority; ``action_date`` is only set when an action was recorded."""

    issue: str = ""
    issue_date: datetime
    action: str | None = None
    action_date: datetime | None = None

    _empty = field_validator("issue", mode="before")(text_or_empty)


class Event(ValueObject):
    title: str = ""
    description: str = ""
    type: str = ""
    address: str = ""
    start_date: datetime
    end_date: datetime

    _empty = field_validator("title", "description", "type", "address", mode="before")(
        text_or_empty
    )


class LocateResult(ValueObject):
    """The force and neighbourhood responsible for a point."""

    force_id: str
    neighbourhood_id: str


class Person(ValueObject):
    """A member of a neighbourhood policing team."""

    name: str
    rank: str
    bio: str = ""
    contact_details: ContactDetails = ContactDetails()

    _empty = field_validator("bio", mode="before")(text_or_empty)


class BoundaryPoint(ValueObject):
    latitude: float
    longitude: float
