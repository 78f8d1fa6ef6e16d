from __future__ import annotations

import math
from enum import Enum

from . import config
from .collision import resolve_collisions
from .linalg import Vec3


class MoveState(Enum):
    IDLE = "idle"
    SEEKING = "seeking"


class AvatarState:
    """Logical avatar owned by the session and mutated once per tick.

    `bob` is a purely visual vertical offset; `position` never leaves the
    ground plane because of it.
    """

    def __init__(self, position: Vec3 | None = None):
        self.position = position.clone() if position is not None else Vec3()
        self.target = self.position.clone()
        self.heading = 0.0
        self.bob = 0.0
        self.state = MoveState.IDLE

    def remaining(self) -> float:
        return self.position.dist(self.target)


def set_target(avatar: AvatarState, point: Vec3) -> None:
    """Replace the destination; the previous one is simply forgotten."""
    avatar.target = Vec3(point.x, point.y, point.z)
    if avatar.remaining() > config.ARRIVE_EPSILON:
        avatar.state = MoveState.SEEKING
    else:
        avatar.state = MoveState.IDLE


def propose_step(position: Vec3, target: Vec3, speed: float, dt: float) -> Vec3:
    offset = target - position
    dist = offset.mag()
    if dist == 0:
        return position.clone()
    step = min(speed * dt, dist)
    return position + offset.norm() * step


def face(position: Vec3, target: Vec3, current: float) -> float:
    """Yaw that points the body's +z at the target, ignoring height."""
    dx = target.x - position.x
    dz = target.z - position.z
    if dx == 0 and dz == 0:
        return current
    return math.atan2(dx, dz)


def bob_offset(t: float) -> float:
    return abs(math.sin(t * config.BOB_FREQUENCY)) * config.BOB_HEIGHT


def update(
    avatar: AvatarState,
    dt: float,
    obstacles,
    t: float = 0.0,
    speed: float = config.SPEED,
    body_radius: float = config.AVATAR_RADIUS,
) -> None:
    if avatar.remaining() <= config.ARRIVE_EPSILON:
        avatar.state = MoveState.IDLE
    else:
        avatar.state = MoveState.SEEKING

    if avatar.state is MoveState.IDLE:
        avatar.bob = 0.0
        return

    proposed = propose_step(avatar.position, avatar.target, speed, dt)
    avatar.position = resolve_collisions(proposed, obstacles, body_radius)
    avatar.heading = face(avatar.position, avatar.target, avatar.heading)
    avatar.bob = bob_offset(t)

    if avatar.remaining() <= config.ARRIVE_EPSILON:
        avatar.state = MoveState.IDLE
        avatar.bob = 0.0
