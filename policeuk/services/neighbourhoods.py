"""Service for the neighbourhood endpoints."""

from datetime import datetime
from typing import Any

from policeuk.exceptions import (
    NeighbourhoodDecodeError,
    NeighbourhoodMappingError,
    NeighbourhoodNotFound,
)
from policeuk.schemas.neighbourhoods import (
    BoundaryPoint,
    Centre,
    ContactDetails,
    Event,
    Link,
    LocateResult,
    Neighbourhood,
    NeighbourhoodLocation,
    NeighbourhoodSummary,
    Person,
    Priority,
)
from policeuk.services.base import BaseService

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _parse_datetime(value: str) -> datetime:
    return datetime.strptime(value, DATETIME_FORMAT)


def _neighbourhood(content: dict[str, Any]) -> Neighbourhood:
    contact = content.get("contact_details") or {}
    centre = content.get("centre") or {}

    return Neighbourhood(
        id=content["id"],
        name=content["name"],
        force_url=content.get("url_force"),
        description=content.get("description"),
        population=content["population"],
        contact_details=ContactDetails(
            email=contact.get("email"),
            telephone=contact.get("telephone"),
            mobile=contact.get("mobile"),
            web=contact.get("web"),
            facebook=contact.get("facebook"),
            twitter=contact.get("twitter"),
            youtube=contact.get("youtube"),
        ),
        centre=Centre(latitude=centre.get("latitude"), longitude=centre.get("longitude")),
        links=[
            Link(title=link.get("title"), url=link.get("url"), description=link.get("description"))
            for link in content.get("links") or []
        ],
        locations=[
            NeighbourhoodLocation(
                name=location.get("name"),
                type=location.get("type"),
                telephone=location.get("telephone"),
                address=location.get("address"),
                postcode=location.get("postcode"),
                latitude=location.get("latitude"),
                longitude=location.get("longitude"),
                description=location.get("description"),
            )
            for location in content.get("locations") or []
        ],
    )


def _priority(priority: dict[str, Any]) -> Priority:
    action_date = priority["action-date"]
    return Priority(
        issue=priority.get("issue"),
        issue_date=_parse_datetime(priority["issue-date"]),
        action=priority.get("action"),
        action_date=None if action_date is None else _parse_datetime(action_date),
    )


def _event(event: dict[str, Any]) -> Event:
    return Event(
        title=event.get("title"),
        description=event.get("description"),
        type=event.get("type"),
        address=event.get("address"),
        start_date=_parse_datetime(event["start_date"]),
        end_date=_parse_datetime(event["end_date"]),
    )


def _person(person: dict[str, Any]) -> Person:
    return Person(
        name=person["name"],
        rank=person["rank"],
        bio=person.get("bio"),
        contact_details=person.get("contact_details") or {},
    )


class NeighbourhoodService(BaseService):
    """Neighbourhoods: https://data.police.uk/docs/method/neighbourhoods/"""

    not_found_error = NeighbourhoodNotFound
    decode_error = NeighbourhoodDecodeError
    mapping_error = NeighbourhoodMappingError
    decode_message = "unable to decode json"

    async def by_force_id(self, force_id: str) -> list[NeighbourhoodSummary]:
        """List the neighbourhoods of a force."""
        content = await self._get_json(
            self._path(force_id, "neighbourhoods"),
            f"unable to find neighbourhoods with id of {force_id}",
        )

        return self._map_list(
            "unable to parse neighbourhood summaries",
            lambda summary: NeighbourhoodSummary(id=summary["id"], name=summary["name"]),
            content,
        )

    async def get(self, force_id: str, neighbourhood_id: str) -> Neighbourhood:
        """
        Fetch a single neighbourhood.

        Args:
            force_id: Force slug
            neighbourhood_id: Neighbourhood id within the force

        Returns:
            The neighbourhood, with empty strings for missing contact details
        """
        content = await self._get_json(
            self._path(force_id, neighbourhood_id),
            f"unable to find neighbourhood with force id of {force_id} and id of {neighbourhood_id}",
        )

        return self._map("unable to parse neighbourhood", _neighbourhood, content)

    async def priorities(self, force_id: str, neighbourhood_id: str) -> list[Priority]:
        content = await self._get_json(
            self._path(force_id, neighbourhood_id, "priorities"),
            "unable to find neighbourhood priorities with force id of "
            f"{force_id} and id of {neighbourhood_id}",
        )

        return self._map_list("unable to parse neighbourhood priorities", _priority, content)

    async def events(self, force_id: str, neighbourhood_id: str) -> list[Event]:
        content = await self._get_json(
            self._path(force_id, neighbourhood_id, "events"),
            "unable to find neighbourhood events with force id of "
            f"{force_id} and id of {neighbourhood_id}",
        )

        return self._map_list("unable to parse neighbourhood events", _event, content)

    async def locate(self, latitude: float, longitude: float) -> LocateResult:
        """Find the force and neighbourhood responsible for a point."""
        content = await self._get_json(
            "/locate-neighbourhood",
            f"unable to find neighbourhood with latitude of {latitude} and longitude of {longitude}",
            {"q": f"{latitude},{longitude}"},
        )

        return self._map(
            "unable to parse located neighbourhood",
            lambda located: LocateResult(
                force_id=located["force"],
                neighbourhood_id=located["neighbourhood"],
            ),
            content,
        )

    async def people(self, force_id: str, neighbourhood_id: str) -> list[Person]:
        """Members of the neighbourhood's policing team."""
        content = await self._get_json(
            self._path(force_id, neighbourhood_id, "people"),
            f"unable to find people for force {force_id} and neighbourhood {neighbourhood_id}",
        )

        return self._map_list("unable to parse neighbourhood people", _person, content)

    async def boundary(self, force_id: str, neighbourhood_id: str) -> list[BoundaryPoint]:
        """Points of the neighbourhood's boundary polygon, in order."""
        content = await self._get_json(
            self._path(force_id, neighbourhood_id, "boundary"),
            f"unable to find boundary for force {force_id} and neighbourhood {neighbourhood_id}",
        )

        return self._map_list(
            "unable to parse neighbourhood boundary",
            lambda point: BoundaryPoint(latitude=point["latitude"], longitude=point["longitude"]),
            content,
        )
