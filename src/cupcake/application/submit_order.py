"""Application service: Submit Order use case.

Encodes the order, performs exactly one round trip through the gateway and
turns whatever comes back into an Outcome.  Nothing is retried or cached.
"""

from __future__ import annotations

import logging

from cupcake.application.dto import DecodeFailure, Outcome, Success, TransportFailure
from cupcake.domain.exceptions import EncodeFailure, MalformedPayload, TransportError
from cupcake.domain.gateway.order_gateway import OrderGateway
from cupcake.domain.model.order import Order

logger = logging.getLogger(__name__)


def confirmation_message(order: Order) -> str:
    """Text shown to the customer once the server has accepted *order*."""
    return (
        f"Your order for {order.quantity}x {order.cake_type_name.lower()} "
        f"cupcakes is on its way!"
    )


class SubmitOrderHandler:

    def __init__(self, gateway: OrderGateway) -> None:
        self._gateway = gateway

    def handle(self, order: Order) -> Outcome:
        """Submit *order* once.

        Steps:
        1. Encode locally; an encoding failure sends nothing.
        2. POST the body through the gateway.
        3. Decode the echoed order; the confirmation text is built from the
           server's copy, not the local one.
        """
        try:
            body = order.encode()
        except EncodeFailure:
            logger.warning("Failed to encode order", exc_info=True)
            return TransportFailure("Failed to encode order")

        logger.debug("Submitting order: %s", body.decode("utf-8"))

        try:
            response = self._gateway.post_order(body)
        except TransportError as exc:
            logger.warning("No data in response: %s", exc)
            return TransportFailure(str(exc))

        try:
            echoed = Order.decode(response)
        except MalformedPayload as exc:
            raw = response.decode("utf-8", errors="replace")
            logger.warning("Invalid response: %s (%s)", raw, exc)
            return DecodeFailure(raw)

        return Success(confirmation_message(echoed))
