"""Abstract gateway to the remote order endpoint."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderGateway(ABC):

    @abstractmethod
    def post_order(self, body: bytes) -> bytes:
        """Send one encoded order and return the raw response body.

        Raises TransportError if no response body could be obtained.
        """
