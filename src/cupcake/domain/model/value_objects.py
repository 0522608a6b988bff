"""Fixed catalogue values shared across the domain.

Cake types travel over the wire as an index into ``CAKE_TYPES``, so the
order of that tuple is part of the protocol and must never change.
"""

from __future__ import annotations

from cupcake.domain.exceptions import ValidationError

CAKE_TYPES: tuple[str, ...] = ("Vanilla", "Chocolate", "Strawberry", "Rainbow")

# Range of the quantity stepper.  The Order itself does not enforce it.
MIN_QUANTITY = 3
MAX_QUANTITY = 20


def is_cake_type(index: int) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(CAKE_TYPES)


def cake_type_name(index: int) -> str:
    """Return the display name for a cake type index."""
    if not is_cake_type(index):
        raise ValidationError(
            f"Unknown cake type {index!r}, expected 0..{len(CAKE_TYPES) - 1}"
        )
    return CAKE_TYPES[index]


def cake_type_index(name: str) -> int:
    """Case-insensitive reverse lookup of ``cake_type_name``."""
    wanted = name.strip().lower()
    for index, candidate in enumerate(CAKE_TYPES):
        if candidate.lower() == wanted:
            return index
    raise ValidationError(
        f"Unknown cake type '{name}'. Choose from: {', '.join(CAKE_TYPES)}"
    )
