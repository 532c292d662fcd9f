from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from flatgeom.tolerance import resolve_eps


@dataclass(frozen=True, init=False)
class Interval:
    """A closed number range. The bounds are swapped on construction so `min <= max`."""

    min: float
    max: float

    def __init__(self, a: float, b: float) -> None:
        lo, hi = (float(a), float(b)) if a <= b else (float(b), float(a))
        object.__setattr__(self, "min", lo)
        object.__setattr__(self, "max", hi)

    @staticmethod
    def from_values(values: Iterable[float]) -> "Interval":
        vals = [float(v) for v in values]
        if not vals:
            raise ValueError("Interval.from_values needs at least one value")
        return Interval(min(vals), max(vals))

    @staticmethod
    def from_center(center: float, width: float) -> "Interval":
        if width < 0.0:
            raise ValueError("Interval width must be non-negative")
        return Interval(center - width / 2.0, center + width / 2.0)

    @staticmethod
    def union(a: "Interval", b: "Interval") -> "Interval":
        return Interval(min(a.min, b.min), max(a.max, b.max))

    @staticmethod
    def intersection(a: "Interval", b: "Interval") -> Optional["Interval"]:
        if a.max < b.min or b.max < a.min:
            return None
        return Interval(max(a.min, b.min), min(a.max, b.max))

    @property
    def length(self) -> float:
        return self.max - self.min

    @property
    def mid(self) -> float:
        if math.isinf(self.min) or math.isinf(self.max):
            return self.min + self.max
        return (self.min + self.max) / 2.0

    @property
    def is_singleton(self) -> bool:
        return self.min == self.max

    def contains(self, value: float, strict: bool = False, eps: float = 0.0) -> bool:
        if strict:
            return self.min + eps < value < self.max - eps
        return self.min - eps <= value <= self.max + eps

    def inflate(self, amount: float) -> "Interval":
        # Deflating past zero width collapses onto the midpoint.
        if amount * -2.0 > self.length:
            m = self.mid
            return Interval(m, m)
        return Interval(self.min - amount, self.max + amount)

    def value_at(self, t: float) -> float:
        return self.min * (1.0 - t) + self.max * t

    def remap(self, value: float) -> float:
        return (value - self.min) / (self.max - self.min)

    def equals(self, other: "Interval", eps: Optional[float] = None) -> bool:
        tol = resolve_eps(eps)
        return abs(self.min - other.min) <= tol and abs(self.max - other.max) <= tol

    def with_min(self, new_min: float) -> "Interval":
        if new_min > self.max:
            raise ValueError("Interval min must not exceed max")
        return Interval(new_min, self.max)

    def with_max(self, new_max: float) -> "Interval":
        if new_max < self.min:
            raise ValueError("Interval max must not be below min")
        return Interval(self.min, new_max)
