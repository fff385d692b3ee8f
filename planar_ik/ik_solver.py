"""Inverse kinematics (multi-start numerical search) core module.

Each attempt perturbs the input pose, then repeatedly nudges one joint at a
time along its finite-difference derivative until the end-effector is within
tolerance of the target or the iteration budget runs out. Every converged,
collision-free attempt contributes one pose to the result.
"""
from __future__ import annotations

import logging
import numbers
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np

from .chain import Joint, JointChain, MalformedChainError, validate_chain
from .geometry import Geometry, Point2D, Vec2
from .kinematics import _end_point, check_floor_collision, forward_kinematics

logger = logging.getLogger(__name__)

# Below this squared derivative magnitude a joint has no leverage on the tip.
_MIN_LEVERAGE = 1e-12

# ---------------------------------------------------------------------------
# Public dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IKParams:
    """Solver budget and step settings.

    perturbation is the half-width (degrees) of the uniform random offset
    applied to every joint at the start of an attempt; jacobian_step is the
    finite-difference step in degrees.
    """
    num_attempts: int = 20
    max_iterations: int = 100
    tolerance: float = 0.1
    perturbation: float = 30.0
    jacobian_step: float = 0.1
    damping: float = 0.5
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("num_attempts", "max_iterations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be > 0")
        if not self.tolerance > 0:
            raise ValueError("tolerance must be > 0")
        if not self.perturbation >= 0:
            raise ValueError("perturbation must be >= 0")
        if not self.jacobian_step > 0:
            raise ValueError("jacobian_step must be > 0")
        if not self.damping > 0:
            raise ValueError("damping must be > 0")


@dataclass(frozen=True)
class SolutionSet:
    """Poses reaching ``target``, in attempt order.

    Near-identical poses from different attempts are all kept.
    """
    target: Point2D
    solutions: tuple = ()
    attempts: int = 0

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self) -> Iterator[JointChain]:
        return iter(self.solutions)

    def __getitem__(self, index: int) -> JointChain:
        return self.solutions[index]

    @property
    def found(self) -> bool:
        return bool(self.solutions)

    def select(self, index: int) -> Optional[JointChain]:
        """Solution at ``index`` clamped into range, or None when empty."""
        if not self.solutions:
            return None
        return self.solutions[min(max(index, 0), len(self.solutions) - 1)]

    def closest(self) -> Optional[JointChain]:
        if not self.solutions:
            return None
        return min(self.solutions,
                   key=lambda s: Geometry.distance(forward_kinematics(s), self.target))

# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------

def _as_target(target: Vec2) -> Point2D:
    if len(target) != 2:
        raise MalformedChainError(f"target must have two coordinates, got {target!r}")
    x, y = float(target[0]), float(target[1])
    if not (np.isfinite(x) and np.isfinite(y)):
        raise MalformedChainError(f"target must be finite, got ({x}, {y})")
    return Point2D(x, y)


class IKSolver:
    """Multi-start coordinate-descent IK solver for planar chains.

    Coordinate System:
        - Same frame as :mod:`planar_ik.kinematics`: base at the origin,
          +X right, +Y up, floor at y = 0.

    Each attempt gets its own random stream spawned from the seed (or from
    the generator passed to :meth:`solve`), so a fixed seed gives the same
    SolutionSet whether attempts run serially or on ``workers`` threads.
    """
    def __init__(self, params: Optional[IKParams] = None, *, workers: int = 1) -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.params = params if params is not None else IKParams()
        self.workers = int(workers)

    def solve(self, target: Vec2, chain: Sequence[Joint],
              *, rng: Optional[np.random.Generator] = None) -> SolutionSet:
        goal = _as_target(target)
        chain = validate_chain(chain)
        if rng is None:
            rng = np.random.default_rng(self.params.seed)
        streams = rng.spawn(self.params.num_attempts)
        run = partial(self._attempt, goal, chain)
        if self.workers > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(run, streams))
        else:
            results = [run(s) for s in streams]
        solutions = tuple(r for r in results if r is not None)
        logger.debug("IK target (%.3f, %.3f): %d/%d attempts converged",
                     goal.x, goal.y, len(solutions), len(streams))
        return SolutionSet(target=goal, solutions=solutions, attempts=len(streams))

    def solve_or_none(self, target: Vec2, chain: Sequence[Joint]) -> Optional[SolutionSet]:
        result = self.solve(target, chain)
        if not result.found:
            logger.warning("IK unreachable for %s after %d attempts", tuple(target), result.attempts)
            return None
        return result

    def batch_solve(self, targets: Iterable[Vec2], chain: Sequence[Joint]) -> List[SolutionSet]:
        return [self.solve(t, chain) for t in targets]

    def _attempt(self, goal: Point2D, chain: JointChain,
                 rng: np.random.Generator) -> Optional[JointChain]:
        p = self.params
        n = len(chain)
        lengths = np.array([j.length for j in chain], dtype=float)
        lo = np.array([j.min_angle for j in chain], dtype=float)
        hi = np.array([j.max_angle for j in chain], dtype=float)
        angles = np.array([j.angle for j in chain], dtype=float)
        angles += rng.uniform(-p.perturbation, p.perturbation, size=n)
        np.clip(angles, lo, hi, out=angles)
        target = np.array(goal, dtype=float)

        for _ in range(p.max_iterations):
            dx, dy = target - _end_point(angles, lengths)
            if np.hypot(dx, dy) < p.tolerance:
                np.clip(angles, lo, hi, out=angles)
                pose = tuple(j.with_angle(a) for j, a in zip(chain, angles))
                return pose if check_floor_collision(pose) else None

            for i in range(n):
                current = _end_point(angles, lengths)
                held = angles[i]
                angles[i] = held + p.jacobian_step
                jx, jy = (_end_point(angles, lengths) - current) / p.jacobian_step
                angles[i] = held
                leverage = jx * jx + jy * jy
                if leverage < _MIN_LEVERAGE:
                    continue
                update = (dx * jx + dy * jy) / leverage * p.damping
                angles[i] = np.clip(held + update, lo[i], hi[i])
        return None


def inverse_kinematics(target: Vec2, chain: Sequence[Joint],
                       params: Optional[IKParams] = None,
                       *, rng: Optional[np.random.Generator] = None) -> SolutionSet:
    """Search for joint angles that put the end-effector at ``target``.

    Never raises for unreachable targets; an empty SolutionSet is a normal
    outcome. Malformed chains or non-finite targets raise MalformedChainError.
    """
    return IKSolver(params).solve(target, chain, rng=rng)


__all__ = [
    "IKParams",
    "SolutionSet",
    "IKSolver",
    "inverse_kinematics",
]
