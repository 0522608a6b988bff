"""Order entity: the state behind the cupcake order screen.

The Order is mutable and observable.  Every assignment to one of its
fields is published to subscribers so the presentation layer can re-render
and re-evaluate ``is_valid``.  The entity also owns the wire schema used
to talk to the order endpoint (``encode`` / ``decode``).
"""

from __future__ import annotations

import inspect
import json
import weakref
from dataclasses import dataclass
from typing import Any, Callable

from cupcake.domain.exceptions import EncodeFailure, MalformedPayload
from cupcake.domain.model.value_objects import CAKE_TYPES, cake_type_name, is_cake_type

OrderObserver = Callable[["Order", str], None]

# Wire name -> attribute name.  Insertion order is the wire field order.
WIRE_FIELDS: dict[str, str] = {
    "type": "cake_type",
    "quantity": "quantity",
    "extraFrosting": "extra_frosting",
    "addSprinkles": "add_sprinkles",
    "name": "name",
    "streetAddress": "street_address",
    "city": "city",
    "zip": "zip",
}

_INT_FIELDS = ("type", "quantity")
_BOOL_FIELDS = ("extraFrosting", "addSprinkles")
_STR_FIELDS = ("name", "streetAddress", "city", "zip")

_OBSERVED_FIELDS = frozenset(WIRE_FIELDS.values()) | {"special_request"}


@dataclass
class Order:
    """A single cupcake order.

    ``special_request`` only gates whether the topping toggles are shown;
    it is never sent over the wire.  ``extra_frosting`` and
    ``add_sprinkles`` keep their last-set values even when the gate is off.
    """

    cake_type: int = 0
    quantity: int = 3
    special_request: bool = False
    extra_frosting: bool = False
    add_sprinkles: bool = False
    name: str = ""
    street_address: str = ""
    city: str = ""
    zip: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "_subscribers", [])

    def __setattr__(self, attr: str, value: Any) -> None:
        super().__setattr__(attr, value)
        if attr in _OBSERVED_FIELDS and "_subscribers" in self.__dict__:
            self._notify(attr)

    # --- Change notification --------------------------------------------------

    def subscribe(self, callback: OrderObserver) -> Callable[[], None]:
        """Call *callback(order, field)* after every field assignment.

        Only a weak reference to *callback* is kept.  Returns a function
        that cancels the subscription.
        """
        if inspect.ismethod(callback):
            ref: weakref.ReferenceType = weakref.WeakMethod(callback)
        else:
            ref = weakref.ref(callback)
        self._subscribers.append(ref)

        def unsubscribe() -> None:
            if ref in self._subscribers:
                self._subscribers.remove(ref)

        return unsubscribe

    def _notify(self, attr: str) -> None:
        # Drop subscribers that have been garbage collected.
        self._subscribers[:] = [r for r in self._subscribers if r() is not None]
        for ref in list(self._subscribers):
            callback = ref()
            if callback is not None:
                callback(self, attr)

    # --- Computed properties --------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """True when every shipping address field is filled in."""
        return all((self.name, self.street_address, self.city, self.zip))

    @property
    def cake_type_name(self) -> str:
        return cake_type_name(self.cake_type)

    # --- Wire format ----------------------------------------------------------

    def wire_fields(self) -> dict[str, Any]:
        return {wire: getattr(self, attr) for wire, attr in WIRE_FIELDS.items()}

    def encode(self) -> bytes:
        """Serialize to the compact JSON wire format.

        Never checks ``is_valid``: gating submission is the caller's job.
        """
        try:
            text = json.dumps(self.wire_fields(), separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise EncodeFailure(f"Failed to encode order: {exc}") from exc
        return text.encode("utf-8")

    @staticmethod
    def decode(data: bytes | str) -> Order:
        """Parse a wire payload back into a new Order.

        Extra keys are ignored.  Raises MalformedPayload on anything that
        does not match the schema.
        """
        try:
            raw = json.loads(data)
        except (ValueError, RecursionError) as exc:
            raise MalformedPayload(f"Payload is not valid JSON: {exc}") from exc

        if not isinstance(raw, dict):
            raise MalformedPayload(
                f"Expected a JSON object, got {type(raw).__name__}"
            )

        missing = [key for key in WIRE_FIELDS if key not in raw]
        if missing:
            raise MalformedPayload(f"Missing required fields: {', '.join(missing)}")

        for key in _INT_FIELDS:
            _expect(key, raw[key], int)
        for key in _BOOL_FIELDS:
            _expect(key, raw[key], bool)
        for key in _STR_FIELDS:
            _expect(key, raw[key], str)

        if not is_cake_type(raw["type"]):
            raise MalformedPayload(
                f"Field 'type' must be 0..{len(CAKE_TYPES) - 1}, got {raw['type']}"
            )

        return Order(**{attr: raw[wire] for wire, attr in WIRE_FIELDS.items()})


def _expect(key: str, value: Any, kind: type) -> None:
    # bool is a subclass of int; a flag must not pass as a count or index.
    if kind is int and isinstance(value, bool):
        ok = False
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise MalformedPayload(
            f"Field '{key}' must be {kind.__name__}, got {type(value).__name__}"
        )
