"""In-memory fake gateway for testing.

Implements the same abstract interface as the requests gateway but never
touches the network: it records every body it is given and replays
canned responses.
"""

from __future__ import annotations

import threading
from concurrent.futures import Executor, Future
from typing import Callable

from cupcake.domain.exceptions import TransportError
from cupcake.domain.gateway.order_gateway import OrderGateway


class FakeOrderGateway(OrderGateway):

    def __init__(
        self,
        responses: list[bytes | Exception] | None = None,
        echo: bool = False,
    ) -> None:
        self.requests: list[bytes] = []
        self._responses = list(responses or [])
        self._echo = echo

    def post_order(self, body: bytes) -> bytes:
        self.requests.append(body)
        if self._echo:
            return body
        if not self._responses:
            raise TransportError("No data in response: no canned response left")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class BlockingOrderGateway(FakeOrderGateway):
    """Echo gateway that holds each request until ``release()`` is called."""

    def __init__(self) -> None:
        super().__init__(echo=True)
        self.entered = threading.Event()
        self._gate = threading.Event()

    def post_order(self, body: bytes) -> bytes:
        self.entered.set()
        self._gate.wait(timeout=5)
        return super().post_order(body)

    def release(self) -> None:
        self._gate.set()


class Recorder:
    """Bound-method subscriber that remembers what it was told."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def __call__(self, *args) -> None:
        self.calls.append(args[-1])

    def on_order_changed(self, order, field: str) -> None:
        self.calls.append(field)


class DeferredExecutor(Executor):
    """Queues submitted work until ``run_pending()`` is called."""

    def __init__(self) -> None:
        self._pending: list[tuple[Future, Callable[[], object]]] = []

    def submit(self, fn, /, *args, **kwargs) -> Future:
        future: Future = Future()
        self._pending.append((future, lambda: fn(*args, **kwargs)))
        return future

    def run_pending(self) -> None:
        while self._pending:
            future, call = self._pending.pop(0)
            try:
                future.set_result(call())
            except Exception as exc:
                future.set_exception(exc)
