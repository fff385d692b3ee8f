"""Public package exports for the planar arm kinematics library."""

from .geometry import Geometry, Point2D, ORIGIN
from .chain import (
    Joint,
    JointChain,
    MalformedChainError,
    DEFAULT_JOINT,
    MIN_JOINTS,
    MAX_JOINTS,
    validate_chain,
    default_chain,
    resize_chain,
    max_reach,
)
from .kinematics import (
    FLOOR_Y,
    joint_positions,
    forward_kinematics,
    check_floor_collision,
    set_joint_angle,
)
from .ik_solver import IKParams, SolutionSet, IKSolver, inverse_kinematics
from .config import Config
from .controller import ArmController, Mode

__version__ = "0.1.0"

__all__ = [
    "Geometry",
    "Point2D",
    "ORIGIN",
    "Joint",
    "JointChain",
    "MalformedChainError",
    "DEFAULT_JOINT",
    "MIN_JOINTS",
    "MAX_JOINTS",
    "validate_chain",
    "default_chain",
    "resize_chain",
    "max_reach",
    "FLOOR_Y",
    "joint_positions",
    "forward_kinematics",
    "check_floor_collision",
    "set_joint_angle",
    "IKParams",
    "SolutionSet",
    "IKSolver",
    "inverse_kinematics",
    "Config",
    "ArmController",
    "Mode",
]
