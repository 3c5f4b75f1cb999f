"""A free-look camera with first- and third-person rotations."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from tankwars.transform3d import look_at, rotation_about_axis

__all__ = ["Camera"]

_WORLD_UP = np.array([0.0, 1.0, 0.0])


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _rotate(vector: np.ndarray, angle: float, axis: np.ndarray) -> np.ndarray:
    return rotation_about_axis(angle, axis)[:3, :3] @ vector


class Camera:
    """Camera described by a position and forward, right and up vectors."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 2.0, 5.0),
        center: Sequence[float] = (0.0, 2.0, 4.0),
        up: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> None:
        self.distance_to_target = 2.0
        self.position = np.zeros(3)
        self.forward = np.zeros(3)
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self.set(position, center, up)

    def set(
        self,
        position: Sequence[float],
        center: Sequence[float],
        up: Sequence[float],
    ) -> None:
        """Place the camera at ``position`` looking at ``center``."""
        self.position = np.asarray(position, dtype=float).copy()
        self.forward = _normalize(np.asarray(center, dtype=float) - self.position)
        self.right = np.cross(self.forward, np.asarray(up, dtype=float))
        self.up = np.cross(self.right, self.forward)

    def move_forward(self, distance: float) -> None:
        """Move along the forward direction projected on the ground plane."""
        direction = _normalize(np.array([self.forward[0], 0.0, self.forward[2]]))
        self.position = self.position + direction * distance

    def translate_forward(self, distance: float) -> None:
        """Move along the forward vector."""
        self.position = self.position + _normalize(self.forward) * distance

    def translate_upward(self, distance: float) -> None:
        """Move along the up vector."""
        self.position = self.position + _normalize(self.up) * distance

    def translate_right(self, distance: float) -> None:
        """Move along the right vector projected on the ground plane."""
        direction = _normalize(np.array([self.right[0], 0.0, self.right[2]]))
        self.position = self.position + direction * distance

    def _rotate_first_person(self, angle: float, axis: np.ndarray) -> None:
        axis = np.array(axis, dtype=float)
        self.forward = _normalize(_rotate(self.forward, angle, axis))
        self.right = _normalize(_rotate(self.right, angle, axis))
        self.up = np.cross(self.right, self.forward)

    def rotate_first_person_ox(self, angle: float) -> None:
        """Pitch around the camera's right vector."""
        self._rotate_first_person(angle, self.right)

    def rotate_first_person_oy(self, angle: float) -> None:
        """Yaw around the world up axis."""
        self._rotate_first_person(angle, _WORLD_UP)

    def rotate_first_person_oz(self, angle: float) -> None:
        """Roll around the camera's forward vector."""
        self._rotate_first_person(angle, self.forward)

    def _rotate_third_person(self, rotation) -> None:
        self.translate_forward(self.distance_to_target)
        rotation()
        self.translate_forward(-self.distance_to_target)

    def rotate_third_person_ox(self, angle: float) -> None:
        """Orbit the target around the camera's right vector."""
        self._rotate_third_person(lambda: self.rotate_first_person_ox(angle))

    def rotate_third_person_oy(self, angle: float) -> None:
        """Orbit the target around the world up axis."""
        self._rotate_third_person(lambda: self.rotate_first_person_oy(angle))

    def rotate_third_person_oz(self, angle: float) -> None:
        """Roll while keeping the target fixed."""
        self._rotate_third_person(lambda: self.rotate_first_person_oz(angle))

    def view_matrix(self) -> np.ndarray:
        """Return the 4x4 view matrix."""
        return look_at(self.position, self.position + self.forward, self.up)

    def target_position(self) -> np.ndarray:
        """Return the point the camera orbits in third-person mode."""
        return self.position + self.forward * self.distance_to_target