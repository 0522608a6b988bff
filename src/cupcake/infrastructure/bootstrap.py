"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from cupcake.application.submit_order import SubmitOrderHandler
from cupcake.infrastructure.http.requests_order_gateway import RequestsOrderGateway
from cupcake.infrastructure.settings import Settings


def settings() -> Settings:
    return Settings.from_env()


def order_gateway(config: Settings | None = None) -> RequestsOrderGateway:
    return RequestsOrderGateway(config or settings())


def submit_order_handler(config: Settings | None = None) -> SubmitOrderHandler:
    return SubmitOrderHandler(gateway=order_gateway(config))
