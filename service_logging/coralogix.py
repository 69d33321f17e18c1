"""Logger that ships batches to the Coralogix HTTP API."""

import logging
from typing import Sequence

import httpx

from service_logging import __version__
from service_logging.config import CoralogixConfig
from service_logging.errors import BackendError, TransportError
from service_logging.models import LogEntry, entry_to_dict

logger = logging.getLogger(__name__)

USER_AGENT = f"service-logging/{__version__}"


def build_payload(config: CoralogixConfig, sub: str, entries: Sequence[LogEntry]) -> dict:
    """Build the request body: credentials, dimensions and the entries."""
    return {
        "privateKey": config.api_key,
        "applicationName": config.application_name,
        "subsystemName": sub,
        "logEntries": [entry_to_dict(e) for e in entries],
    }


async def check_status(resp: httpx.Response) -> None:
    """Raise BackendError for a non-2xx response.

    The body is included since it often explains the failure; if it cannot
    be read an empty string is used.
    """
    if resp.is_success:
        return
    try:
        await resp.aread()
        body = resp.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError, LookupError):
        body = ""
    raise BackendError(resp.status_code, body)


class CoralogixLogger:
    """Sends each batch to Coralogix in a single POST, without retries.

    One ``httpx.AsyncClient`` is created per logger and reused. *transport*
    replaces the network layer, which is how tests plug in a mock service.
    """

    def __init__(
        self,
        config: CoralogixConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._client = httpx.AsyncClient(
            headers={
                # all our requests are json
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=config.timeout,
            transport=transport,
        )

    @classmethod
    def init(cls, config: CoralogixConfig) -> "CoralogixLogger":
        """Initialize a logger from configuration."""
        return cls(config)

    @property
    def config(self) -> CoralogixConfig:
        return self._config

    async def send(self, sub: str, entries: Sequence[LogEntry]) -> None:
        """Send entries to Coralogix.

        Raises TransportError if the request could not be made and
        BackendError if the service rejected it.
        """
        if not entries:
            return

        payload = build_payload(self._config, sub, entries)
        logger.debug(
            "Sending %d log entries for %s/%s to %s",
            len(entries),
            self._config.application_name,
            sub,
            self._config.endpoint,
        )
        request = self._client.build_request("POST", self._config.endpoint, json=payload)
        try:
            # the body is only read by check_status, and only on failure
            resp = await self._client.send(request, stream=True)
        except httpx.TransportError as exc:
            logger.debug("Log batch to %s failed: %s", self._config.endpoint, exc)
            raise TransportError(
                f"Failed to send logs to {self._config.endpoint}: {exc}"
            ) from exc

        try:
            await check_status(resp)
        finally:
            await resp.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "CoralogixLogger":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
