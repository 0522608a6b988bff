"""Outcome of one order submission.

A tagged union rather than a flag plus optional data: callers match on the
concrete class to decide what to show or log.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Success:
    """The server echoed a well-formed order back."""

    message: str
    ok = True


@dataclass(frozen=True)
class TransportFailure:
    """No response body was obtainable (or nothing was sent at all)."""

    detail: str
    ok = False


@dataclass(frozen=True)
class DecodeFailure:
    """A body arrived but did not match the order wire schema."""

    raw_body: str
    ok = False


Outcome = Union[Success, TransportFailure, DecodeFailure]
