from __future__ import annotations

from enum import Enum, auto


class ForwardingPolicy(Enum):
    """What a chained ``match`` step does with a failure it has no handler for."""

    FORWARD = auto()
    RAISE_ON_ACCESS = auto()
