"""Service for the crime endpoints."""

from datetime import date, datetime
from typing import Any

from policeuk.exceptions import CrimeDecodeError, CrimeMappingError, CrimeNotFound
from policeuk.months import current_month, format_month, parse_month, previous_month
from policeuk.schemas.crimes import (
    Crime,
    CrimeCategory,
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
from policeuk.services.base import BaseService


def _street(location: dict[str, Any]) -> Street:
    street = location["street"]
    return Street(id=street["id"], name=street["name"])


def _outcome_status(status: dict[str, Any] | None) -> OutcomeStatus | None:
    if status is None:
        return None
    return OutcomeStatus(category=status["category"], date=parse_month(status["date"]))


def _crime_location(record: dict[str, Any]) -> Location | UnknownLocation:
    """Pick the location variant: a nested object is a mapped location, anything else is textual."""
    location = record["location"]
    if isinstance(location, dict):
        return Location(
            latitude=location["latitude"],
            longitude=location["longitude"],
            street=_street(location),
        )

    return UnknownLocation(
        title=location,
        type=record.get("location_type"),
        subtype=record.get("location_subtype"),
    )


def _crime(record: dict[str, Any], with_outcome_status: bool = True) -> Crime:
    return Crime(
        id=record["id"],
        persistent_id=record.get("persistent_id"),
        category=record["category"],
        context=record.get("context"),
        month=parse_month(record["month"]),
        location=_crime_location(record),
        outcome_status=_outcome_status(record.get("outcome_status")) if with_outcome_status else None,
    )


def _street_crime(record: dict[str, Any]) -> StreetCrime:
    location = record["location"]
    return StreetCrime(
        id=record["id"],
        persistent_id=record["persistent_id"] or "",
        category=record["category"],
        context=record.get("context"),
        month=parse_month(record["month"]),
        location=StreetLocation(
            type=record.get("location_type"),
            subtype=record.get("location_subtype"),
            latitude=location["latitude"],
            longitude=location["longitude"],
            street=_street(location),
        ),
        outcome_status=_outcome_status(record.get("outcome_status")),
    )


def _outcome(content: dict[str, Any]) -> Outcome:
    outcomes = []
    for item in content.get("outcomes") or []:
        person_id = item.get("person_id")
        outcomes.append(
            OutcomeItem(
                category=OutcomeCategory(
                    code=item["category"]["code"],
                    name=item["category"]["name"],
                ),
                date=parse_month(item["date"]),
                person_id=None if person_id is None else str(person_id),
            )
        )

    return Outcome(crime=_crime(content["crime"], with_outcome_status=False), outcomes=outcomes)


def _last_updated(content: dict[str, Any]) -> date:
    # The API reports a full date but only the month is meaningful
    return datetime.strptime(content["date"], "%Y-%m-%d").date().replace(day=1)


class CrimeService(BaseService):
    """
    Crimes: https://data.police.uk/docs/method/crime-street/

    Month arguments are ``date`` objects; only their year and month are sent.
    """

    not_found_error = CrimeNotFound
    decode_error = CrimeDecodeError
    mapping_error = CrimeMappingError
    decode_message = "unable to parse json response"

    async def last_updated(self) -> date:
        """Month of the latest crime data, as the first day of that month."""
        content = await self._get_json(
            "/crime-last-updated",
            "unable to get last updated information",
        )

        return self._map("unable to parse last updated date", _last_updated, content)

    async def categories(self, month: date | None = None) -> list[CrimeCategory]:
        """
        List crime categories.

        Args:
            month: Categories valid for this month (defaults to the latest month)
        """
        params = {"date": format_month(month)} if month else None
        content = await self._get_json("/crime-categories", "unable to get categories", params)

        return self._map_list(
            "unable to parse categories",
            lambda category: CrimeCategory(url=category["url"], name=category["name"]),
            content,
        )

    async def with_no_location(
        self,
        force_id: str,
        category: str = "all-crime",
        month: date | None = None,
    ) -> list[Crime]:
        """
        Crimes that could not be mapped to a location.

        Args:
            force_id: Force slug
            category: Crime category slug
            month: Month to query (defaults to the previous calendar month)

        Returns:
            Crimes whose location is an UnknownLocation
        """
        month_string = format_month(month or previous_month())
        content = await self._get_json(
            "/crimes-no-location",
            f"unable to get crimes with no location for force {force_id}",
            {"category": category, "force": force_id, "date": month_string},
        )

        return self._map_list(
            f"unable to parse crimes with no location for force {force_id}",
            _crime,
            content,
        )

    async def at_location_id(self, location_id: int | str, month: date) -> list[Crime]:
        """Crimes snapped to a specific street location id in a month."""
        month_string = format_month(month)
        content = await self._get_json(
            "/crimes-at-location",
            f"unable to get crimes at location id {location_id} for date {month_string}",
            {"date": month_string, "location_id": location_id},
        )

        return self._map_list(
            f"unable to parse crimes at location id {location_id} for date {month_string}",
            _crime,
            content,
        )

    async def outcome_for_crime(self, crime_id: str) -> Outcome:
        """
        Full outcome history for a crime.

        Args:
            crime_id: The crime's persistent id

        Returns:
            The crime (without its outcome status) and its outcomes in order
        """
        content = await self._get_json(
            self._path("outcomes-for-crime", crime_id),
            f"unable to get outcome for crime id {crime_id}",
        )

        return self._map(f"unable to parse outcome for crime id {crime_id}", _outcome, content)

    async def street_level(
        self,
        longitude: float,
        latitude: float,
        month: date | None = None,
    ) -> list[StreetCrime]:
        """
        Street-level crimes within a one mile radius of a point.

        Args:
            longitude: Longitude of the point
            latitude: Latitude of the point
            month: Month to query (defaults to the current month)
        """
        month_string = format_month(month or current_month())
        description = (
            f"street level crime for longitude {longitude} and latitude {latitude} "
            f"for date {month_string}"
        )
        content = await self._get_json(
            "/crimes-street/all-crime",
            f"unable to get {description}",
            {"lat": latitude, "lng": longitude, "date": month_string},
        )

        return self._map_list(f"unable to parse {description}", _street_crime, content)
