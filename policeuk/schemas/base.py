"""Shared base and field helpers for the value objects."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_TAG_RE = re.compile(r"<[^>]*>")


class ValueObject(BaseModel):
    """Immutable record built once from a decoded API response."""

    model_config = ConfigDict(frozen=True)


def text_or_empty(value: Any) -> Any:
    """Map a null wire value to an empty string."""
    return "" if value is None else value


def strip_tags(value: Any) -> Any:
    """Remove HTML tags from a string, mapping null to an empty string."""
    value = text_or_empty(value)
    if isinstance(value, str):
        return _TAG_RE.sub("", value)
    return value


class ContactDetails(ValueObject):
    """Contact channels for a force officer or neighbourhood team; missing channels are empty strings."""

    email: str = ""
    telephone: str = ""
    mobile: str = ""
    web: str = ""
    facebook: str = ""
    twitter: str = ""
    youtube: str = ""

    _empty = field_validator("*", mode="before")(text_or_empty)
