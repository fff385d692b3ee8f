"""Joint and joint-chain records for planar revolute arms.

A chain is an ordered tuple of :class:`Joint`; index 0 is attached to the
fixed base and the last joint ends at the end-effector. Each joint angle is
relative to the cumulative orientation of the joints before it.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Sequence, Tuple

import numpy as np

MIN_JOINTS = 2
MAX_JOINTS = 6


class MalformedChainError(ValueError):
    """Raised for chains or targets that cannot describe a physical arm."""


# ---------------------------------------------------------------------------
# Public dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Joint:
    """One rotational link. Angles are degrees, bounds are inclusive."""
    angle: float
    min_angle: float
    max_angle: float
    length: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Joint":
        """Build a joint from an ``{angle, min, max, length}`` record."""
        return cls(
            angle=float(data["angle"]),
            min_angle=float(data["min"]),
            max_angle=float(data["max"]),
            length=float(data["length"]),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"angle": self.angle, "min": self.min_angle,
                "max": self.max_angle, "length": self.length}

    @property
    def in_limits(self) -> bool:
        return self.min_angle <= self.angle <= self.max_angle

    def clamp_angle(self, angle: float) -> float:
        return float(np.clip(angle, self.min_angle, self.max_angle))

    def with_angle(self, angle: float) -> "Joint":
        return replace(self, angle=float(angle))

    def clamped(self) -> "Joint":
        return self.with_angle(self.clamp_angle(self.angle))


JointChain = Tuple[Joint, ...]

DEFAULT_JOINT = Joint(angle=45.0, min_angle=-120.0, max_angle=120.0, length=80.0)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_joint(joint: Joint, index: int = 0) -> None:
    values = (joint.angle, joint.min_angle, joint.max_angle, joint.length)
    if not all(np.isfinite(v) for v in values):
        raise MalformedChainError(f"joint {index}: non-finite value in {joint}")
    if joint.min_angle > joint.max_angle:
        raise MalformedChainError(
            f"joint {index}: min {joint.min_angle} exceeds max {joint.max_angle}")
    if joint.length <= 0:
        raise MalformedChainError(
            f"joint {index}: length must be > 0, got {joint.length}")


def validate_chain(chain: Sequence[Joint]) -> JointChain:
    """Check every joint and return the chain as a tuple.

    Angles outside their bounds are accepted here; only operations that
    produce angles are required to clamp.
    """
    for i, joint in enumerate(chain):
        if not isinstance(joint, Joint):
            raise MalformedChainError(f"joint {i}: expected Joint, got {type(joint).__name__}")
        validate_joint(joint, i)
    return tuple(chain)


# ---------------------------------------------------------------------------
# Chain editing
# ---------------------------------------------------------------------------

def default_chain(num_joints: int = MIN_JOINTS) -> JointChain:
    return (DEFAULT_JOINT,) * num_joints


def resize_chain(chain: Sequence[Joint], num_joints: int,
                 fill: Joint = DEFAULT_JOINT) -> JointChain:
    """Keep the first joints of ``chain`` and pad with ``fill`` up to the new size.

    The size is clamped to ``[MIN_JOINTS, MAX_JOINTS]``.
    """
    n = int(np.clip(num_joints, MIN_JOINTS, MAX_JOINTS))
    kept = tuple(chain[:n])
    return kept + (fill,) * (n - len(kept))


def max_reach(chain: Sequence[Joint]) -> float:
    return float(sum(joint.length for joint in chain))


__all__ = [
    "MIN_JOINTS",
    "MAX_JOINTS",
    "MalformedChainError",
    "Joint",
    "JointChain",
    "DEFAULT_JOINT",
    "validate_joint",
    "validate_chain",
    "default_chain",
    "resize_chain",
    "max_reach",
]
