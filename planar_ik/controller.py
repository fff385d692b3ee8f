"""Headless interaction state for driving an arm in forward or inverse mode.

The controller owns the current pose, the end-effector readout and, in
inverse mode, the latest SolutionSet. It performs no rendering and keeps
nothing between sessions. Every handler runs its solve to completion before
returning, so at most one solve is ever in flight.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Optional, Sequence

from .chain import Joint, JointChain, max_reach, resize_chain, validate_chain
from .config import Config
from .geometry import Geometry, Point2D
from .ik_solver import IKParams, IKSolver, SolutionSet, _as_target
from .kinematics import FLOOR_Y, forward_kinematics, set_joint_angle

logger = logging.getLogger(__name__)


class Mode(Enum):
    FORWARD = "forward"
    INVERSE = "inverse"


class ArmController:
    """Forward/inverse kinematics state machine for one planar arm."""

    def __init__(self, chain: Optional[Sequence[Joint]] = None,
                 params: Optional[IKParams] = None,
                 config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self.params = params if params is not None else self.config.solver_params()
        self.mode = Mode.FORWARD
        self.joints: JointChain = (validate_chain(chain) if chain is not None
                                   else self.config.default_chain())
        self.end_effector: Point2D = forward_kinematics(self.joints)
        self.solutions = SolutionSet(target=self.end_effector)
        self.selected = 0

    @property
    def num_joints(self) -> int:
        return len(self.joints)

    def set_mode(self, mode: Mode) -> None:
        self.mode = Mode(mode)
        if self.mode is Mode.INVERSE:
            self.solutions = IKSolver(self.params).solve(self.end_effector, self.joints)
            self.selected = 0
            if self.solutions.found:
                self.joints = self.solutions[0]

    def set_joint_angle(self, index: int, angle: float) -> bool:
        """Move one joint; returns False when the floor check rejects the edit."""
        updated = set_joint_angle(self.joints, index, angle)
        if updated[index].angle != self.joints[index].clamp_angle(angle):
            logger.debug("joint %d -> %.1f rejected: floor collision", index, angle)
            return False
        self.joints = updated
        if self.mode is Mode.FORWARD:
            self.end_effector = forward_kinematics(self.joints)
        return True

    def clamp_target(self, x: float, y: float) -> Point2D:
        """Raise the target to the floor and pull it inside the arm's reach."""
        y = max(y, FLOOR_Y)
        return Geometry.clamp_to_radius((x, y), max_reach(self.joints))

    def set_target(self, x: Optional[float] = None, y: Optional[float] = None) -> SolutionSet:
        """Solve for a new end-effector target.

        Missing coordinates keep their current value. When nothing converges
        the previous pose is kept.
        """
        x = self.end_effector.x if x is None else x
        y = self.end_effector.y if y is None else y
        target = self.clamp_target(*_as_target((x, y)))
        self.solutions = IKSolver(self.params).solve(target, self.joints)
        self.end_effector = target
        if self.solutions.found:
            self.selected = min(self.selected, len(self.solutions) - 1)
            self.joints = self.solutions[self.selected]
        else:
            logger.debug("no IK solution for %s, keeping previous pose", tuple(self.end_effector))
        return self.solutions

    def select_solution(self, index: int) -> bool:
        if not 0 <= index < len(self.solutions):
            return False
        self.selected = index
        self.joints = self.solutions[index]
        return True

    def set_num_joints(self, num_joints: int) -> None:
        self.joints = resize_chain(self.joints, num_joints, fill=self.config.default_joint())
        if self.mode is Mode.INVERSE:
            self.set_target()
        else:
            self.end_effector = forward_kinematics(self.joints)

    def set_ik_params(self, **changes) -> IKParams:
        self.params = replace(self.params, **changes)
        return self.params

    def reset(self) -> None:
        self.joints = self.config.default_chain()
        self.end_effector = forward_kinematics(self.joints)
        self.solutions = SolutionSet(target=self.end_effector)
        self.selected = 0
