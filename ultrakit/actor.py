"""Actors placed in the world and their per-frame movement."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Actor:
    """Position, velocity and per-frame acceleration of an actor."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    velocity_z: float = 0.0
    accel_x: float = 0.0
    accel_y: float = 0.0
    accel_z: float = 0.0

    def update_position(self, delta_time: float) -> None:
        """Advance the position by velocity over delta_time plus the acceleration term."""
        self.x = self.x + self.velocity_x * delta_time + self.accel_x
        self.y = self.y + self.velocity_y * delta_time + self.accel_y
        self.z = self.z + self.velocity_z * delta_time + self.accel_z