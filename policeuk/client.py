"""PoliceUK facade wiring the four services onto one HTTP client."""

import logging

import httpx

from policeuk.config import Settings, get_settings
from policeuk.services import CrimeService, ForceService, NeighbourhoodService, StopAndSearchService

logger = logging.getLogger(__name__)


class PoliceUK:
    """
    Entry point for the data.police.uk API.

    Usage:
        async with PoliceUK() as police:
            forces = await police.forces.all()

    Pass an existing ``httpx.AsyncClient`` to share connection pooling,
    timeouts or transports with the rest of an application. An injected
    client is never closed by PoliceUK.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = client is None

        if client is None:
            client = httpx.AsyncClient(
                timeout=self.settings.timeout,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self.settings.user_agent,
                },
            )
        self.client = client

        base_url = self.settings.base_url
        self._forces = ForceService(client, base_url)
        self._crimes = CrimeService(client, base_url)
        self._neighbourhoods = NeighbourhoodService(client, base_url)
        self._stop_and_search = StopAndSearchService(client, base_url)
        logger.debug(f"PoliceUK client ready for {base_url}")

    @property
    def forces(self) -> ForceService:
        return self._forces

    @property
    def crimes(self) -> CrimeService:
        return self._crimes

    @property
    def neighbourhoods(self) -> NeighbourhoodService:
        return self._neighbourhoods

    @property
    def stop_and_search(self) -> StopAndSearchService:
        return self._stop_and_search

    async def aclose(self) -> None:
        """Close the HTTP client if PoliceUK created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "PoliceUK":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
