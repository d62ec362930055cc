"""Queue configuration."""

import math
import numbers
from dataclasses import dataclass

from linkedq.types import UNBOUNDED, Capacity


@dataclass(frozen=True)
class QueueOptions:
    """Immutable options for a Queue."""

    capacity: Capacity = UNBOUNDED  # maximum number of values (UNBOUNDED = no limit)

    def __post_init__(self) -> None:
        """Validate the capacity."""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, numbers.Real):
            raise TypeError(f"capacity must be a number, got {type(self.capacity).__name__}")
        if math.isnan(self.capacity) or self.capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {self.capacity!r}")

    @property
    def bounded(self) -> bool:
        """True if the capacity is finite."""
        return not math.isinf(self.capacity)
