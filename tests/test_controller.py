"""Tests for the headless forward/inverse controller."""

import pytest

from planar_ik.chain import DEFAULT_JOINT, Joint, MalformedChainError
from planar_ik.controller import ArmController, Mode
from planar_ik.geometry import Geometry
from planar_ik.ik_solver import IKParams
from planar_ik.kinematics import forward_kinematics


@pytest.fixture
def controller():
    return ArmController(params=IKParams(seed=0))


class TestForwardMode:
    def test_starts_in_forward_mode_at_default_pose(self, controller):
        assert controller.mode is Mode.FORWARD
        assert controller.joints == (DEFAULT_JOINT, DEFAULT_JOINT)
        assert controller.end_effector == forward_kinematics(controller.joints)

    def test_joint_edit_moves_end_effector(self, controller):
        assert controller.set_joint_angle(1, 0.0)
        assert controller.joints[1].angle == 0.0
        assert controller.end_effector == forward_kinematics(controller.joints)

    def test_joint_edit_clamped(self, controller):
        assert controller.set_joint_angle(1, 500.0)
        assert controller.joints[1].angle == 120.0

    def test_floor_collision_rejects_edit(self, controller):
        before = controller.joints
        assert not controller.set_joint_angle(0, -60.0)
        assert controller.joints == before

    def test_set_num_joints(self, controller):
        controller.set_num_joints(4)
        assert controller.num_joints == 4
        assert controller.end_effector == forward_kinematics(controller.joints)
        controller.set_num_joints(9)
        assert controller.num_joints == 6

    def test_reset(self, controller):
        controller.set_num_joints(5)
        controller.reset()
        assert controller.joints == (DEFAULT_JOINT, DEFAULT_JOINT)
        assert not controller.solutions.found
        assert controller.selected == 0


class TestInverseMode:
    def test_switching_solves_current_end_effector(self, controller):
        controller.set_mode(Mode.INVERSE)
        assert controller.solutions.target == controller.end_effector
        if controller.solutions.found:
            tip = forward_kinematics(controller.joints)
            assert Geometry.distance(tip, controller.end_effector) < controller.params.tolerance

    def test_set_target_adopts_solution(self, controller):
        controller.set_mode(Mode.INVERSE)
        result = controller.set_target(60.0, 100.0)
        assert result.found
        assert controller.joints == result[controller.selected]
        tip = forward_kinematics(controller.joints)
        assert Geometry.distance(tip, (60.0, 100.0)) < controller.params.tolerance

    def test_missing_coordinate_keeps_current(self, controller):
        controller.set_mode(Mode.INVERSE)
        y = controller.end_effector.y
        controller.set_target(x=20.0)
        assert controller.end_effector.y == pytest.approx(y)

    def test_target_below_floor_raised(self, controller):
        assert controller.clamp_target(100.0, -40.0) == (100.0, 0.0)

    def test_target_beyond_reach_projected(self, controller):
        p = controller.clamp_target(300.0, 400.0)
        assert p.x == pytest.approx(96.0)
        assert p.y == pytest.approx(128.0)

    def test_rejected_target_leaves_state_untouched(self, controller):
        controller.set_mode(Mode.INVERSE)
        before = controller.end_effector
        with pytest.raises(MalformedChainError):
            controller.set_target(float("nan"), 10.0)
        assert controller.end_effector == before
        controller.set_target(y=before.y + 5.0)
        assert controller.end_effector.x == pytest.approx(before.x)

    def test_empty_result_keeps_previous_pose(self):
        tight = (Joint(45.0, 0.0, 60.0, 80.0), Joint(45.0, 0.0, 60.0, 80.0))
        controller = ArmController(chain=tight, params=IKParams(seed=0))
        controller.set_mode(Mode.INVERSE)
        before = controller.joints
        result = controller.set_target(60.0, 100.0)
        assert not result.found
        assert controller.joints == before

    def test_select_solution(self, controller):
        controller.set_mode(Mode.INVERSE)
        result = controller.set_target(60.0, 100.0)
        last = len(result) - 1
        assert controller.select_solution(last)
        assert controller.joints == result[last]
        assert not controller.select_solution(len(result))
        assert controller.selected == last

    def test_selected_index_clamped_into_new_set(self, controller):
        controller.set_mode(Mode.INVERSE)
        controller.set_target(60.0, 100.0)
        controller.selected = 10_000
        result = controller.set_target(70.0, 95.0)
        if result.found:
            assert controller.selected == len(result) - 1

    def test_set_ik_params(self, controller):
        params = controller.set_ik_params(num_attempts=5)
        assert params.num_attempts == 5
        assert controller.params.seed == 0
        with pytest.raises(ValueError):
            controller.set_ik_params(tolerance=-1.0)
