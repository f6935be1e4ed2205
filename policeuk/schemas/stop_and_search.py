"""Pydantic schemas for stop and search records."""

from datetime import datetime

from pydantic import field_validator

from policeuk.schemas.base import ValueObject, text_or_empty


class Stop(ValueObject):
    """A recorded stop and search encounter."""

    type: str
    datetime: datetime
    age_range: str
    gender: str
    involved_person: bool
    self_defined_ethnicity: str
    removal_of_more_than_outer_clothing: bool | None = None
    officer_defined_ethnicity: str
    object_of_search: str
    legislation: str
    location: str | None = None
    operation: str | None = None
    operation_name: str | None = None
    outcome: bool
    outcome_linked_to_object_of_search: str | None = None

    # Descriptive fields are sometimes published as null
    _empty = field_validator(
        "type",
        "age_range",
        "gender",
        "self_defined_ethnicity",
        "officer_defined_ethnicity",
        "object_of_search",
        "legislation",
        mode="before",
    )(text_or_empty)
