"""Type definitions for linkedq."""

import math
from typing import TypeAlias, TypeVar

# Generic type variable for stored values
T = TypeVar("T")

# A queue capacity: a non-negative count, or UNBOUNDED
Capacity: TypeAlias = int | float

UNBOUNDED: float = math.inf
