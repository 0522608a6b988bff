"""Presentation model for the single order screen.

Holds what the screen needs besides the Order itself: the stepper range,
whether the topping toggles are visible, whether the submit control is
enabled, and the confirmation alert.  A UI (or the CLI) binds to this
object and re-renders whenever a listener registered with ``on_change``
fires.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable

from cupcake.application.dto import Outcome, Success
from cupcake.application.submit_order import SubmitOrderHandler
from cupcake.domain.exceptions import ValidationError
from cupcake.domain.model.order import Order
from cupcake.domain.model.value_objects import MAX_QUANTITY, MIN_QUANTITY

logger = logging.getLogger(__name__)

FormListener = Callable[[str], None]


class OrderForm:

    def __init__(
        self,
        handler: SubmitOrderHandler,
        order: Order | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._handler = handler
        self._executor = executor or ThreadPoolExecutor(max_workers=1)
        self._lock = threading.Lock()
        self._listeners: list[FormListener] = []

        self.order = order or Order()
        self.submitting = False
        self.confirmation_message = ""
        self.showing_confirmation = False

        self._unsubscribe = self.order.subscribe(self._order_changed)

    # --- Listeners ------------------------------------------------------------

    def on_change(self, listener: FormListener) -> None:
        """Register *listener(field)*; fired for order and form changes."""
        self._listeners.append(listener)

    def _emit(self, field: str) -> None:
        for listener in list(self._listeners):
            listener(field)

    def _order_changed(self, order: Order, field: str) -> None:
        self._emit(field)

    # --- Controls -------------------------------------------------------------

    def set_quantity(self, value: int) -> None:
        """Stepper semantics: clamp into the allowed range."""
        self.order.quantity = max(MIN_QUANTITY, min(MAX_QUANTITY, value))

    def increment(self) -> None:
        self.set_quantity(self.order.quantity + 1)

    def decrement(self) -> None:
        self.set_quantity(self.order.quantity - 1)

    @property
    def toppings_visible(self) -> bool:
        return self.order.special_request

    @property
    def can_submit(self) -> bool:
        return self.order.is_valid and not self.submitting

    # --- Submission -----------------------------------------------------------

    def place_order(self) -> Future[Outcome]:
        """Submit the order in the background.

        Refused while the order is incomplete or a previous submission is
        still in flight.  What gets sent is the order as it was at the time
        of the call; later edits on the form do not leak into the request.
        """
        with self._lock:
            if not self.order.is_valid:
                raise ValidationError("Order is missing shipping details")
            if self.submitting:
                raise ValidationError("An order is already being placed")
            self.submitting = True
            snapshot = dataclasses.replace(self.order)
        self._emit("submitting")
        return self._executor.submit(self._run, snapshot)

    def _run(self, snapshot: Order) -> Outcome:
        try:
            outcome = self._handler.handle(snapshot)
        finally:
            with self._lock:
                self.submitting = False
            self._emit("submitting")

        if isinstance(outcome, Success):
            self.confirmation_message = outcome.message
            self.showing_confirmation = True
            self._emit("confirmation")
        else:
            # Failures stay out of the UI; the handler has already logged them.
            logger.debug("Order not confirmed: %r", outcome)
        return outcome

    def dismiss_confirmation(self) -> None:
        self.showing_confirmation = False
        self._emit("confirmation")

    def close(self) -> None:
        """Stop observing the order and release the worker thread."""
        self._unsubscribe()
        self._executor.shutdown(wait=True)
