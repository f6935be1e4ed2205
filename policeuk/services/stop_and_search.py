"""Service for the stop and search endpoints."""

from datetime import date, datetime
from typing import Any

from policeuk.exceptions import (
    StopAndSearchDecodeError,
    StopAndSearchMappingError,
    StopAndSearchNotFound,
)
from policeuk.months import format_month, previous_month
from policeuk.schemas.stop_and_search import Stop
from policeuk.services.base import BaseService


def _stop(record: dict[str, Any]) -> Stop:
    return Stop(
        type=record["type"],
        datetime=datetime.fromisoformat(record["datetime"]),
        age_range=record["age_range"],
        gender=record["gender"],
        involved_person=record["involved_person"],
        self_defined_ethnicity=record["self_defined_ethnicity"],
        removal_of_more_than_outer_clothing=record.get("removal_of_more_than_outer_clothing"),
        officer_defined_ethnicity=record["officer_defined_ethnicity"],
        object_of_search=record["object_of_search"],
        legislation=record["legislation"],
        location=record.get("location"),
        operation=record.get("operation"),
        operation_name=record.get("operation_name"),
        outcome=record["outcome"],
        outcome_linked_to_object_of_search=record.get("outcome_linked_to_object_of_search"),
    )


class StopAndSearchService(BaseService):
    """Stop and search: https://data.police.uk/docs/method/stops-no-location/"""

    not_found_error = StopAndSearchNotFound
    decode_error = StopAndSearchDecodeError
    mapping_error = StopAndSearchMappingError
    decode_message = "unable to parse json response"

    async def with_no_location(self, force_id: str, month: date | None = None) -> list[Stop]:
        """
        Stop and searches that could not be mapped to a location.

        Args:
            force_id: Force slug
            month: Month to query (defaults to the previous calendar month)
        """
        content = await self._get_json(
            "/stops-no-location",
            f"unable to find stop and searches with no location with id of {force_id}",
            {"force": force_id, "date": format_month(month or previous_month())},
        )

        return self._map_list(
            f"unable to parse stop and searches with no location with id of {force_id}",
            _stop,
            content,
        )
