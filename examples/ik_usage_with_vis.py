"""Interactive visualization demo for the planar arm IK solver.

This script uses pygame to:
  - Track the mouse position as the end-effector target.
  - Draw the floor, the reach circle, the selected arm pose and faint
    outlines of the alternative solutions.
  - Let number keys 0-9 pick a solution and +/- change the joint count.

Prerequisites:
    pip install -e .[vis]

Run from project root:
    python examples/ik_usage_with_vis.py

Close the window or press ESC to exit.

NOTE: This file is for debugging / demonstration only and is optional.
"""
from __future__ import annotations
import logging
from typing import Sequence, Tuple

import pygame

from planar_ik import ArmController, Mode, Point2D, joint_positions

Color = Tuple[int, int, int]

# ---------------- Configuration (edit as needed) ----------------
WIDTH, HEIGHT = 800, 600
BG_COLOR: Color = (20, 20, 25)
FLOOR_COLOR: Color = (90, 100, 120)
REACH_COLOR: Color = (60, 70, 90)
ARM_COLOR: Color = (120, 180, 255)
ALT_COLOR: Color = (70, 90, 120)
JOINT_COLOR: Color = (255, 170, 120)
TARGET_COLOR: Color = (255, 80, 80)
TEXT_COLOR: Color = (235, 235, 235)
FPS = 30

SCREEN_ORIGIN_X = WIDTH * 0.5   # Screen pixel where the arm base is drawn
SCREEN_ORIGIN_Y = HEIGHT * 0.75


def arm_to_screen(p: Point2D) -> Tuple[int, int]:
    # arm frame is y-up, screen is y-down
    return (int(SCREEN_ORIGIN_X + p.x), int(SCREEN_ORIGIN_Y - p.y))


def screen_to_arm(px: int, py: int) -> Tuple[float, float]:
    return (float(px - SCREEN_ORIGIN_X), float(SCREEN_ORIGIN_Y - py))


def draw_pose(surface: pygame.Surface, chain: Sequence, color: Color, width: int) -> None:
    points = [arm_to_screen(p) for p in joint_positions(chain)]
    pygame.draw.lines(surface, color, False, points, width)
    if width > 1:
        for pt in points:
            pygame.draw.circle(surface, JOINT_COLOR, pt, 5)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    controller = ArmController()
    controller.set_mode(Mode.INVERSE)

    pygame.init()
    pygame.display.set_caption("Planar IK Demo")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)
    last_mouse = None

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif pygame.K_0 <= event.key <= pygame.K_9:
                    controller.select_solution(event.key - pygame.K_0)
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    controller.set_num_joints(controller.num_joints + 1)
                elif event.key == pygame.K_MINUS:
                    controller.set_num_joints(controller.num_joints - 1)

        # Only re-solve when the mouse actually moved
        mouse = pygame.mouse.get_pos()
        if mouse != last_mouse:
            last_mouse = mouse
            controller.set_target(*screen_to_arm(*mouse))

        screen.fill(BG_COLOR)
        base = arm_to_screen(Point2D(0.0, 0.0))
        reach = sum(j.length for j in controller.joints)
        pygame.draw.circle(screen, REACH_COLOR, base, int(reach), 1)
        pygame.draw.line(screen, FLOOR_COLOR, (0, base[1]), (WIDTH, base[1]), 2)

        for i, alt in enumerate(controller.solutions):
            if i != controller.selected:
                draw_pose(screen, alt, ALT_COLOR, 1)
        draw_pose(screen, controller.joints, ARM_COLOR, 3)
        pygame.draw.circle(screen, TARGET_COLOR, arm_to_screen(controller.end_effector), 4)

        tip = controller.end_effector
        angles = " ".join(f"{j.angle:.0f}" for j in controller.joints)
        lines = [
            f"target ({tip.x:.0f}, {tip.y:.0f})  joints {controller.num_joints}",
            f"solutions {len(controller.solutions)}  selected {controller.selected}",
            f"angles {angles}",
        ]
        status_color = TEXT_COLOR if controller.solutions.found else (255, 90, 90)
        for row, text in enumerate(lines):
            screen.blit(font.render(text, True, status_color), (10, 10 + row * 18))

        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
