"""Example usage of the planar arm kinematics without any GUI.
Run: python example_ik_usage.py
"""
import logging

from planar_ik import IKParams, IKSolver, Joint, check_floor_collision, forward_kinematics

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Explicit geometry (replace with your arm's values)
ARM = (
    Joint(angle=45.0, min_angle=-170.0, max_angle=170.0, length=80.0),
    Joint(angle=45.0, min_angle=-170.0, max_angle=170.0, length=80.0),
    Joint(angle=-30.0, min_angle=-120.0, max_angle=120.0, length=40.0),
)

tip = forward_kinematics(ARM)
print(f"Start pose reaches ({tip.x:.2f}, {tip.y:.2f}), floor ok={check_floor_collision(ARM)}")

solver = IKSolver(IKParams(seed=1))

# Sample targets in the arm frame (base at origin, +y up)
targets = [
    (120.0, 60.0),
    (-50.0, 100.0),
    (10.0, 190.0),
    (400.0, 0.0),   # beyond reach
]

for t in targets:
    result = solver.solve_or_none(t, ARM)
    if result is None:
        print(f"Target {t}: unreachable")
        continue
    pose = result.closest()
    angles = ", ".join(f"{j.angle:.1f}" for j in pose)
    print(f"Target {t}: {len(result)} solutions, closest angles=({angles}) deg")
