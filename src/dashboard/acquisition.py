"""Data acquisition for the dashboard.

A supplier produces the squad and member snapshots in one pass:
- StaticSupplier hands back in-memory collections (the built-in sample
  data by default) and never fails.
- RemoteSupplier GETs ``/api/squads`` and ``/api/members`` concurrently.
  Any transport error, invalid URL, non-2xx status, undecodable body or malformed
  record is reported as a single AcquisitionFailure.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import httpx

from src.dashboard.config import (
    API_BASE_URL,
    MEMBERS_ENDPOINT,
    REQUEST_TIMEOUT_SECONDS,
    SQUADS_ENDPOINT,
)
from src.dashboard.records import (
    MemberRecord,
    SquadRecord,
    parse_members,
    parse_squads,
)
from src.dashboard.sample_data import SAMPLE_MEMBERS, SAMPLE_SQUADS

logger = logging.getLogger(__name__)


class AcquisitionFailure(Exception):
    """Raised when squad or member data cannot be obtained."""


@dataclass(frozen=True)
class Dataset:
    """Both collections produced by a single acquisition pass."""

    squads: Sequence[SquadRecord]
    members: Sequence[MemberRecord]


class DataSupplier(ABC):
    """Source of the squad and member collections."""

    @abstractmethod
    async def supply(self) -> Dataset:
        """Produce both collections.

        Raises:
            AcquisitionFailure: if either collection cannot be obtained.
        """


class StaticSupplier(DataSupplier):
    """Supplies fixed collections; defaults to the built-in sample data."""

    def __init__(
        self,
        squads: Optional[Sequence[SquadRecord]] = None,
        members: Optional[Sequence[MemberRecord]] = None,
    ):
        self.squads = tuple(SAMPLE_SQUADS if squads is None else squads)
        self.members = tuple(SAMPLE_MEMBERS if members is None else members)

    async def supply(self) -> Dataset:
        logger.info(
            "Using static data: %d squads, %d members",
            len(self.squads), len(self.members),
        )
        return Dataset(squads=self.squads, members=self.members)


class RemoteSupplier(DataSupplier):
    """Fetches both collections from the dashboard API over HTTP.

    Args:
        base_url: Scheme and host of the API, e.g. ``http://localhost:3001``.
        timeout: Per-request timeout in seconds.
        client: Optional pre-built ``httpx.AsyncClient``. When given it is
            used as-is (its own base URL applies if ``base_url`` is relative)
            and is left open afterwards.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def supply(self) -> Dataset:
        if self._client is not None:
            return await self._fetch_all(self._client)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._fetch_all(client)

    async def _fetch_all(self, client: httpx.AsyncClient) -> Dataset:
        # Both requests run to completion before the first failure is
        # raised, so no request outlives the client.
        squads, members = await asyncio.gather(
            self._fetch(client, SQUADS_ENDPOINT, parse_squads),
            self._fetch(client, MEMBERS_ENDPOINT, parse_members),
            return_exceptions=True,
        )
        for result in (squads, members):
            if isinstance(result, BaseException):
                raise result

        logger.info("Fetched %d squads and %d members", len(squads), len(members))
        return Dataset(squads=squads, members=members)

    async def _fetch(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        parse: Callable[[object], List],
    ) -> List:
        url = f"{self.base_url}{endpoint}"
        logger.info("GET %s", url)
        try:
            response = await client.get(url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise AcquisitionFailure(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            logger.warning("Response from %s is not valid JSON: %s", url, e)
            raise AcquisitionFailure(f"Invalid JSON from {url}: {e}") from e

        try:
            return parse(payload)
        except ValueError as e:
            logger.warning("Malformed records from %s: %s", url, e)
            raise AcquisitionFailure(f"Malformed records from {url}: {e}") from e
