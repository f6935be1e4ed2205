"""Service for the force endpoints."""

from typing import Any

from policeuk.exceptions import ForceDecodeError, ForceMappingError, ForceNotFound
from policeuk.schemas.forces import EngagementMethod, Force, ForceSummary, SeniorOfficer
from policeuk.services.base import BaseService


def _force(content: dict[str, Any]) -> Force:
    return Force(
        id=content["id"],
        name=content["name"],
        url=content.get("url"),
        description=content.get("description"),
        telephone=content.get("telephone"),
        engagement_methods=[
            EngagementMethod(
                title=method.get("title"),
                description=method.get("description"),
                url=method.get("url"),
                type=method.get("type"),
            )
            for method in content.get("engagement_methods") or []
        ],
    )


def _senior_officer(officer: dict[str, Any]) -> SeniorOfficer:
    return SeniorOfficer(
        name=officer["name"],
        rank=officer["rank"],
        bio=officer.get("bio"),
        contact_details=officer.get("contact_details") or {},
    )


class ForceService(BaseService):
    """Forces: https://data.police.uk/docs/method/forces/"""

    not_found_error = ForceNotFound
    decode_error = ForceDecodeError
    mapping_error = ForceMappingError
    decode_message = "unable to decode json"

    async def all(self) -> list[ForceSummary]:
        """List every force (id and name only)."""
        content = await self._get_json("/forces", "unable to find forces")

        return self._map_list(
            "unable to parse forces",
            lambda force: ForceSummary(id=force["id"], name=force["name"]),
            content,
        )

    async def by_id(self, force_id: str) -> Force:
        """
        Fetch a single force.

        Args:
            force_id: Force slug, e.g. ``leicestershire``

        Returns:
            The force with HTML removed from its description
        """
        content = await self._get_json(
            self._path("forces", force_id),
            f"unable to find force with id of {force_id}",
        )

        return self._map(f"unable to parse force with id of {force_id}", _force, content)

    async def senior_officers(self, force_id: str) -> list[SeniorOfficer]:
        content = await self._get_json(
            self._path("forces", force_id, "people"),
            f"unable to find senior officers for force with id of {force_id}",
        )

        return self._map_list(
            f"unable to parse senior officers for force with id of {force_id}",
            _senior_officer,
            content,
        )
