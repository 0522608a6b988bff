"""requests-backed implementation of OrderGateway."""

from __future__ import annotations

import logging

import requests

from cupcake.domain.exceptions import TransportError
from cupcake.domain.gateway.order_gateway import OrderGateway
from cupcake.infrastructure.settings import Settings

logger = logging.getLogger(__name__)


class RequestsOrderGateway(OrderGateway):

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self._settings = settings
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    # --- OrderGateway interface -----------------------------------------------

    def post_order(self, body: bytes) -> bytes:
        url = self._settings.endpoint_url
        try:
            response = self.session.post(
                url,
                data=body,
                timeout=self._settings.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        logger.debug("POST %s -> HTTP %s", url, response.status_code)

        # Any non-empty body is handed back, even on an error status, so
        # the caller can report what the server actually said.
        if not response.content:
            raise TransportError(f"No data in response: HTTP {response.status_code}")
        return response.content
