"""Pydantic schemas for police forces."""

from pydantic import field_validator

from policeuk.schemas.base import ContactDetails, ValueObject, strip_tags, text_or_empty


class ForceSummary(ValueObject):
    """One row of the force listing."""

    id: str
    name: str


class EngagementMethod(ValueObject):
    """A public contact channel published by a force (social media, etc.)."""

    title: str = ""
    description: str = ""
    url: str = ""
    type: str = ""

    _strip = field_validator("title", "description", mode="before")(strip_tags)
    _empty = field_validator("url", "type", mode="before")(text_or_empty)


class Force(ValueObject):
    """Full details of a single force."""

    id: str
    name: str
    url: str = ""
    description: str = ""
    telephone: str = ""
    engagement_methods: tuple[EngagementMethod, ...] = ()

    _strip = field_validator("description", mode="before")(strip_tags)
    _empty = field_validator("url", "telephone", mode="before")(text_or_empty)


class SeniorOfficer(ValueObject):
    name: str
    rank: str
    bio: str = ""
    contact_details: ContactDetails = ContactDetails()

    _empty = field_validator("bio", mode="before")(text_or_empty)
