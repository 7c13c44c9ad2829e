"""HTTPS POST collaborator used to reach the carrier API."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from freightpickup.services.pickup.errors import TransportError


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: bytes


class Transport(Protocol):
    async def post(self, url: str, content_type: str, payload: bytes, timeout: float) -> TransportResponse:
        ...


class HttpTransport:
    """POST bytes over httpx and hand back status + body, whatever the status.

    Non-2xx answers are returned, not raised: the carrier reports faults with
    error statuses and the body still has to be classified.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def post(self, url: str, content_type: str, payload: bytes, timeout: float) -> TransportResponse:
        try:
            if self._client is not None:
                resp = await self._client.post(
                    url, content=payload, headers={"content-type": content_type}, timeout=timeout
                )
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    resp = await client.post(url, content=payload, headers={"content-type": content_type})
        except httpx.TimeoutException as exc:
            raise TransportError(f"carrier request timed out after {timeout}s") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"carrier request failed: {exc}") from exc
        return TransportResponse(status_code=resp.status_code, body=resp.content)
