from typing import Iterable, Protocol

import httpx

from .config import EMPLOYEE_SERVICE_URL, HTTP_TIMEOUT
from .errors import RecordStoreUnavailable
from .filters import FilterSpec, matches_attributes
from .schemas import WorkerProfile


class WorkerRepository(Protocol):
    async def query_by_attributes(self, filters: FilterSpec) -> list[WorkerProfile]:
        """Return discoverable workers matching the attribute filters, unordered."""
        ...


class HttpWorkerRepository:
    """
    Queries the employee-service record store over HTTP.

    zone and min_rating are pushed down to the store; tag filters are
    evaluated by the pipeline's attribute stage.
    """

    def __init__(
        self,
        base_url: str = EMPLOYEE_SERVICE_URL,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _params(self, filters: FilterSpec) -> dict:
        params = {}
        if filters.zone:
            params["zone"] = filters.zone
        if filters.min_rating is not None:
            params["min_rating"] = filters.min_rating
        return params

    async def query_by_attributes(self, filters: FilterSpec) -> list[WorkerProfile]:
        url = f"{self.base_url}/employees/discoverable"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=self._params(filters))
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            raise RecordStoreUnavailable(f"Timeout calling record store: {url}") from e
        except httpx.HTTPStatusError as e:
            raise RecordStoreUnavailable(
                f"Record store responded {e.response.status_code}: {url}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise RecordStoreUnavailable(f"Bad response from record store: {url}") from e

        if not isinstance(payload, list):
            raise RecordStoreUnavailable(f"Unexpected payload from record store: {url}")

        try:
            return [WorkerProfile.model_validate(item) for item in payload]
        except ValueError as e:
            raise RecordStoreUnavailable(f"Malformed employee record from {url}") from e


class InMemoryWorkerRepository:
    def __init__(self, workers: Iterable[WorkerProfile] = ()):
        self._workers = list(workers)

    async def query_by_attributes(self, filters: FilterSpec) -> list[WorkerProfile]:
        return [w for w in self._workers if matches_attributes(w, filters)]
