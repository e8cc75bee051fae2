"""
particle_life module: world/physics.py

Point-mass kinematics for creatures:
- integrate position by velocity (one frame per step, no dt)
- reflect velocity at the walls; positions are never clamped
- steering nudges along the unit vector between two bodies
"""

from __future__ import annotations
import math
from typing import Tuple

import config


def distance(ax: float, ay: float, bx: float, by: float) -> Tuple[float, float, float]:
    """
    Returns (dx, dy, dist) from a to b.
    """
    dx = bx - ax
    dy = by - ay
    return dx, dy, math.sqrt(dx * dx + dy * dy)


def move(body) -> None:
    body.x += body.vx
    body.y += body.vy


def bounce(body, w: float, h: float, radius: float = config.RADIUS) -> None:
    """
    Flip the velocity component of any axis whose position lies past the
    wall threshold. A body already outside keeps flipping every frame until
    it drifts back in.
    """
    if body.x < radius or body.x > w - radius:
        body.vx *= -1
    if body.y < radius or body.y > h - radius:
        body.vy *= -1


def steer(body, dx: float, dy: float, dist: float, sign: int, strength: float = config.STEER_STRENGTH) -> None:
    # sign > 0 pulls toward (dx, dy), sign < 0 pushes away
    if dist <= 0 or sign == 0:
        return
    body.vx += sign * dx / dist * strength
    body.vy += sign * dy / dist * strength
