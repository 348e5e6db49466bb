"""Perspective and orthographic cameras, and a free-flight camera."""

from __future__ import annotations

import copy
import enum

from .assets import Asset
from .color import Color
from .matrix import Matrix
from .quaternion import Quaternion
from .transform import Transform
from .vector import Vector, radians

FREE_FLIGHT_CLEAR_COLOR = Color(0.5, 0.75, 1.0, 1.0)


class CameraType(enum.Enum):
    PERSPECTIVE = 0
    ORTHOGRAPHIC = 1


class ClearBuffer(enum.IntFlag):
    DEPTH = 1 << 0
    STENCIL = 1 << 1
    COLOR = 1 << 2


class Camera(Asset):
    """A camera holding view and projection matrices.

    ``flip_y`` applies the clip-space correction for APIs whose y axis points
    down; ``fov`` is stored halved, as the projection uses it.
    """

    def __init__(
        self,
        name: str,
        type: CameraType,
        clear_color: Color,
        fov: float,
        near_clip: float = 0.1,
        far_clip: float = 10000,
        flip_y: bool = True,
    ) -> None:
        super().__init__(name)
        self.view = Matrix()
        self.projection = Matrix()
        self.view_projection = Matrix()
        self.clear_color = clear_color
        self.type = type
        self.transform = Transform()
        self.fov = fov / 2
        self.aspect_ratio = 0.0
        self.near_clip = near_clip
        self.far_clip = far_clip
        self.ortographic_size = Vector(0.0, 0.0)
        self.flip_y = flip_y

    def update(self, delta_time: float = 0) -> None:
        """Refresh the world transform, view and view-projection matrices."""
        self.transform.update()
        self.view = self.transform.world.inversed()
        if self.type is CameraType.PERSPECTIVE:
            self.view_projection = self.projection * self.view
        else:
            self.view_projection = copy.copy(self.projection)

    def calculate_projection(self) -> None:
        if self.type is CameraType.PERSPECTIVE:
            self.projection = Matrix.perspective(radians(self.fov), self.aspect_ratio, self.near_clip, self.far_clip)
            if self.flip_y:
                self.projection.up.y *= -1
        else:
            self.projection = Matrix.ortho(
                0.0, self.ortographic_size.x, 0.0, self.ortographic_size.y, self.near_clip, self.far_clip
            )
            if self.flip_y:
                correction = Matrix.from_columns(
                    (1.0, 0.0, 0.0, 0.0),
                    (0.0, -1.0, 0.0, 0.0),
                    (0.0, 0.0, 0.5, 0.0),
                    (0.0, 0.0, 0.5, 1.0),
                )
                self.projection = correction * self.projection

    def on_window_resize(self, width: int, height: int) -> None:
        """Adapt the projection to a new window size."""
        if height == 0:
            raise ValueError("window height must not be zero")
        self.aspect_ratio = float(width) / float(height)
        self.ortographic_size.x = float(width)
        self.ortographic_size.y = float(height)
        self.calculate_projection()
        self.update()

    def close(self) -> None:
        self.transform.close()


class FreeFlightCamera(Camera):
    """A perspective camera steered by mouse look and directional movement."""

    def __init__(self, name: str, speed: float, sensitivity: float, flip_y: bool = True) -> None:
        super().__init__(name, CameraType.PERSPECTIVE, Color(0.5, 0.75, 1.0, 1.0), 90, flip_y=flip_y)
        self.speed = speed
        self.speed_multiplier = 1.0
        self.sensitivity = sensitivity
        self.rotation = Vector(0.0, 0.0, 0.0)
        self.position = Vector(0.0, 0.0, 0.0)
        self.movement = Vector(0.0, 0.0, 0.0)

    def update(self, delta_time: float = 0) -> None:
        if self.movement.x != 0 or self.movement.z != 0:
            direction = self.movement.normalized()
            step = self.speed * self.speed_multiplier * delta_time
            right = self.transform.world.right.to_vector().resized(3)
            backward = self.transform.world.backward.to_vector().resized(3)
            self.position += right * (direction.x * step)
            self.position += backward * (direction.z * step)

        yaw = Quaternion.from_angle_axis(radians(self.rotation.x), (1.0, 0.0, 0.0))
        pitch = Quaternion.from_angle_axis(radians(self.rotation.y), (0.0, 1.0, 0.0))
        rotation = (pitch * yaw).to_matrix()

        translation = Matrix()
        translation.translate(self.position)
        self.transform.local = translation * rotation

        super().update()

    def look(self, x_delta: float, y_delta: float) -> None:
        """Turn by a mouse movement, scaled by the sensitivity."""
        self.rotation.x -= y_delta * self.sensitivity
        self.rotation.y -= x_delta * self.sensitivity

    def scroll(self, delta: float) -> None:
        """Double the speed on scroll up, halve it on scroll down."""
        if delta > 0:
            self.speed_multiplier *= 2
        elif delta < 0:
            self.speed_multiplier *= 0.5
        if self.speed_multiplier <= 0:
            self.speed_multiplier = 1.0

    def move(self, x: float, z: float) -> None:
        """Add to the movement direction; negative z is forward.

        Pass +1/-1 when a key is pressed and the opposite when it is released.
        """
        self.movement.x += x
        self.movement.z += z