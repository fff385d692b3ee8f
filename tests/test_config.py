"""Tests for YAML-backed configuration."""

import pytest

from planar_ik.chain import DEFAULT_JOINT, Joint
from planar_ik.config import Config
from planar_ik.ik_solver import IKParams


class TestDefaults:
    def test_solver_params_match_ik_defaults(self):
        assert Config().solver_params() == IKParams()

    def test_default_chain(self):
        assert Config().default_chain() == (DEFAULT_JOINT, DEFAULT_JOINT)

    def test_missing_file_keeps_defaults(self, tmp_path):
        cfg = Config(str(tmp_path / "absent.yaml"))
        assert cfg.get("solver.num_attempts") == 20

    def test_defaults_not_shared_between_instances(self):
        a = Config()
        a.set("solver.tolerance", 0.5)
        assert Config().get("solver.tolerance") == 0.1


class TestDottedAccess:
    def test_get_missing_returns_default(self):
        assert Config().get("solver.nope", 3) == 3
        assert Config().get("arm.default_joint.length") == 80.0

    def test_set_creates_sections(self):
        cfg = Config()
        cfg.set("extra.value", 1)
        assert cfg.to_dict()["extra"] == {"value": 1}


class TestYamlOverrides:
    def test_partial_override_merges(self, tmp_path):
        path = tmp_path / "arm.yaml"
        path.write_text(
            "solver:\n"
            "  num_attempts: 5\n"
            "  seed: 11\n"
            "arm:\n"
            "  num_joints: 3\n"
            "  default_joint: {angle: 30, min: -150, max: 150, length: 60}\n"
        )
        cfg = Config(str(path))
        params = cfg.solver_params()
        assert params.num_attempts == 5
        assert params.seed == 11
        assert params.max_iterations == 100
        assert cfg.default_joint() == Joint(30.0, -150.0, 150.0, 60.0)
        assert len(cfg.default_chain()) == 3

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config(str(path)).solver_params() == IKParams()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            Config(str(path))

    def test_invalid_solver_value_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("solver:\n  tolerance: 0\n")
        with pytest.raises(ValueError):
            Config(str(path)).solver_params()
