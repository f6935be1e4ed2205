"""Request, decode and mapping stages shared by every API service."""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from policeuk.config import get_settings
from policeuk.exceptions import DecodeError, MappingError, TransportError

logger = logging.getLogger(__name__)
settings = get_settings()

# Responses must nest fewer levels than this
MAX_JSON_DEPTH = 512

T = TypeVar("T")


def json_depth(value: Any) -> int:
    """Nesting depth of a decoded JSON value (scalars are 0, ``[]`` is 1)."""
    depth = 0
    level = [value]
    while level:
        containers = [item for item in level if isinstance(item, (dict, list))]
        if not containers:
            break
        depth += 1
        level = []
        for container in containers:
            level.extend(container.values() if isinstance(container, dict) else container)
    return depth


def decode_json(
    content: bytes,
    message: str = "unable to parse json response",
    error: type[DecodeError] = DecodeError,
) -> Any:
    """
    Decode a response body into plain dicts and lists.

    Args:
        content: Raw response body
        message: Message for the raised error
        error: DecodeError subclass to raise

    Returns:
        The decoded JSON value

    Raises:
        DecodeError: If the body is not valid JSON or nests MAX_JSON_DEPTH levels or more
    """
    try:
        payload = json.loads(content)
    except (ValueError, RecursionError) as e:
        logger.warning(f"{message}: {e}")
        raise error.wrap(message, e) from e

    if json_depth(payload) >= MAX_JSON_DEPTH:
        logger.warning(f"{message}: nesting reaches {MAX_JSON_DEPTH}")
        raise error(message)

    return payload


def expect_list(payload: Any) -> list[Any]:
    if not isinstance(payload, list):
        raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
    return payload


class BaseService:
    """
    Base for the per-domain services.

    Each public method makes one GET against data.police.uk, decodes the body
    and maps it onto value objects. Subclasses pick the error types raised at
    each stage and the decode error message.
    """

    not_found_error: type[TransportError] = TransportError
    decode_error: type[DecodeError] = DecodeError
    mapping_error: type[MappingError] = MappingError
    decode_message = "unable to parse json response"

    def __init__(self, client: httpx.AsyncClient, base_url: str = settings.base_url):
        self.client = client
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def _path(*segments: Any) -> str:
        """Join path segments, URL-escaping each one."""
        return "/" + "/".join(quote(str(segment), safe="") for segment in segments)

    async def _get_json(
        self,
        path: str,
        failure: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        GET ``path`` and decode the JSON body.

        Raises:
            TransportError: The request failed or the response was not 2xx
            DecodeError: The body was not valid JSON
        """
        url = f"{self.base_url}{path}"
        logger.info(f"Fetching {path} params={params}")

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"{failure}: {e}")
            raise self.not_found_error.wrap(failure, e) from e

        return decode_json(response.content, self.decode_message, self.decode_error)

    def _map(self, failure: str, mapper: Callable[[Any], T], payload: Any) -> T:
        """Run ``mapper`` over a decoded payload, turning shape/type errors into a MappingError."""
        try:
            return mapper(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"{failure}: {e}")
            raise self.mapping_error.wrap(failure, e) from e

    def _map_list(self, failure: str, mapper: Callable[[Any], T], payload: Any) -> list[T]:
        """Map every element of a JSON array; any bad element fails the whole list."""
        records = self._map(failure, lambda p: [mapper(item) for item in expect_list(p)], payload)
        logger.info(f"Mapped {len(records)} records")
        return records
