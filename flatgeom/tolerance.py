from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

# Absolute distance tolerance used for equality, coincidence and tangency.
ABSOLUTE_TOLERANCE = 1e-6

# Angular tolerance (radians) for parallel/perpendicular checks.
ANGULAR_TOLERANCE = math.pi / 180.0


@dataclass(frozen=True)
class TolerancePolicy:
    absolute: float = ABSOLUTE_TOLERANCE
    angular: float = ANGULAR_TOLERANCE
    # Screen-style coordinates where +y points down.
    invert_y: bool = False

    def __post_init__(self) -> None:
        if not float(self.absolute) > 0.0:
            raise ValueError(f"absolute tolerance must be positive, got {self.absolute}")
        if not float(self.angular) > 0.0:
            raise ValueError(f"angular tolerance must be positive, got {self.angular}")


_current: ContextVar[TolerancePolicy] = ContextVar("flatgeom_tolerance", default=TolerancePolicy())


def current_policy() -> TolerancePolicy:
    return _current.get()


def configure(
    absolute: Optional[float] = None,
    angular: Optional[float] = None,
    invert_y: Optional[bool] = None,
) -> TolerancePolicy:
    """
    Replace the tolerance policy for the current context.

    Values left as None keep their current setting. Calls already running in
    other threads keep whatever policy they read on entry.
    """
    policy = _updated(current_policy(), absolute, angular, invert_y)
    _current.set(policy)
    logger.info("Tolerance policy set: absolute=%g angular=%g invert_y=%s", policy.absolute, policy.angular, policy.invert_y)
    return policy


def reset() -> TolerancePolicy:
    policy = TolerancePolicy()
    _current.set(policy)
    return policy


@contextmanager
def tolerance_context(
    absolute: Optional[float] = None,
    angular: Optional[float] = None,
    invert_y: Optional[bool] = None,
) -> Iterator[TolerancePolicy]:
    policy = _updated(current_policy(), absolute, angular, invert_y)
    token = _current.set(policy)
    try:
        yield policy
    finally:
        _current.reset(token)


def resolve_eps(eps: Optional[float] = None) -> float:
    if eps is None:
        return _current.get().absolute
    return float(eps)


def resolve_angle(eps: Optional[float] = None) -> float:
    if eps is None:
        return _current.get().angular
    return float(eps)


def approximately_equal(a: float, b: float, eps: Optional[float] = None) -> bool:
    return abs(float(a) - float(b)) < resolve_eps(eps)


def _updated(
    base: TolerancePolicy,
    absolute: Optional[float],
    angular: Optional[float],
    invert_y: Optional[bool],
) -> TolerancePolicy:
    changes = {}
    if absolute is not None:
        changes["absolute"] = float(absolute)
    if angular is not None:
        changes["angular"] = float(angular)
    if invert_y is not None:
        changes["invert_y"] = bool(invert_y)
    return replace(base, **changes)
