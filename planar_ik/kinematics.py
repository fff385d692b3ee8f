"""Forward kinematics and floor-collision checks for planar joint chains.

Coordinate System:
    - The base sits at the origin, +X points right and +Y points up.
    - The floor is the line y = 0 through the base.
    - Joint angles are degrees and compose additively along the chain, so a
      joint advances the position by ``length * (cos θ, sin θ)`` where θ is
      the sum of all angles up to and including that joint.
"""
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .chain import Joint, JointChain, validate_chain
from .geometry import ORIGIN, Geometry, Point2D, Vec2

FLOOR_Y = 0.0


def _positions(angles: np.ndarray, lengths: np.ndarray) -> np.ndarray:
    """Return an (n+1, 2) array of base-relative joint positions."""
    steps = lengths[:, None] * Geometry.heading(np.cumsum(angles))
    return np.vstack((np.zeros((1, 2)), np.cumsum(steps, axis=0)))


def _end_point(angles: np.ndarray, lengths: np.ndarray) -> np.ndarray:
    return lengths @ Geometry.heading(np.cumsum(angles))


def _chain_arrays(chain: Sequence[Joint]):
    angles = np.array([j.angle for j in chain], dtype=float)
    lengths = np.array([j.length for j in chain], dtype=float)
    return angles, lengths


def joint_positions(chain: Sequence[Joint], base: Vec2 = ORIGIN) -> List[Point2D]:
    """Base position followed by the end of every link, in chain order."""
    chain = validate_chain(chain)
    pts = _positions(*_chain_arrays(chain))
    return [Point2D(float(x) + base[0], float(y) + base[1]) for x, y in pts]


def forward_kinematics(chain: Sequence[Joint], base: Vec2 = ORIGIN) -> Point2D:
    """End-effector position; relative to the base unless ``base`` is given."""
    return joint_positions(chain, base)[-1]


def check_floor_collision(chain: Sequence[Joint]) -> bool:
    """True when no joint position lies below the floor.

    Only joint positions are tested, not the links between them, so a link
    can still dip below the floor between two valid joints.
    """
    chain = validate_chain(chain)
    ys = _positions(*_chain_arrays(chain))[1:, 1]
    for y in ys:
        if y < FLOOR_Y:
            return False
    return True


def set_joint_angle(chain: Sequence[Joint], index: int, angle: float) -> JointChain:
    """Return ``chain`` with joint ``index`` moved to ``angle``.

    The angle is clamped into the joint's bounds first. If the resulting pose
    puts any joint below the floor the edit is rejected and the unchanged chain
    is returned.
    """
    chain = validate_chain(chain)
    if not 0 <= index < len(chain):
        raise IndexError(f"joint index {index} out of range for {len(chain)} joints")
    joint = chain[index]
    moved = joint.with_angle(joint.clamp_angle(angle))
    candidate = chain[:index] + (moved,) + chain[index + 1:]
    if not check_floor_collision(candidate):
        return chain
    return candidate


__all__ = [
    "FLOOR_Y",
    "joint_positions",
    "forward_kinematics",
    "check_floor_collision",
    "set_joint_angle",
]
