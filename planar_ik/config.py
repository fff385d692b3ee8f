"""Configuration defaults for the solver and the default arm.

Values can be overridden from a YAML file, for example::

    solver:
      num_attempts: 40
      tolerance: 0.05
      seed: 7
    arm:
      num_joints: 3
      default_joint: {angle: 30, min: -150, max: 150, length: 60}
"""
from __future__ import annotations

import copy
import os
from typing import Any, Dict, Optional

import yaml

from .chain import Joint, JointChain, resize_chain
from .ik_solver import IKParams


class Config:
    """Nested configuration with dotted-key access."""

    DEFAULTS: Dict[str, Any] = {
        "solver": {
            "num_attempts": 20,
            "max_iterations": 100,
            "tolerance": 0.1,
            "perturbation": 30.0,
            "jacobian_step": 0.1,
            "damping": 0.5,
            "seed": None,
        },
        "arm": {
            "num_joints": 2,
            "default_joint": {"angle": 45.0, "min": -120.0, "max": 120.0, "length": 80.0},
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to a YAML file. A missing path keeps the defaults.
        """
        self.config = copy.deepcopy(self.DEFAULTS)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        with open(config_file, "r") as f:
            yaml_config = yaml.safe_load(f)
        if yaml_config is None:
            return
        if not isinstance(yaml_config, dict):
            raise ValueError(f"{config_file}: top level must be a mapping")
        self._deep_update(self.config, yaml_config)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up ``key`` using dot notation, e.g. ``"solver.tolerance"``."""
        value = self.config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        keys = key.split(".")
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def solver_params(self) -> IKParams:
        return IKParams(**self.config["solver"])

    def default_joint(self) -> Joint:
        return Joint.from_dict(self.config["arm"]["default_joint"])

    def default_chain(self) -> JointChain:
        joint = self.default_joint()
        return resize_chain((), self.get("arm.num_joints", 2), fill=joint)

    @staticmethod
    def _deep_update(base_dict: Dict, update_dict: Dict) -> None:
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                Config._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.config)
