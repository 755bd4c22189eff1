"""Domain models for delivery stops."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Stop:
    """A delivery location handed to the route sequencer.

    ``identifier`` is opaque to the sequencer and comes back untouched in the
    optimized sequence. ``label`` and ``address`` are only used for log output
    and exports.
    """

    identifier: str
    label: str
    latitude: float
    longitude: float
    address: Optional[str] = None
