"""Base classes for named engine assets: render assets, quads, textures, shaders."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable

from .color import WHITE, Color
from .transform import Transform
from .vector import Vector

QUAD_INDICES = (0, 1, 3, 1, 2, 3)


class Asset:
    """A named asset that can be updated and rendered."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, delta_time: float = 0) -> None:
        """Advance the asset; the base asset does nothing."""

    def render(self) -> None:
        """Draw the asset; the base asset does nothing."""

    def close(self) -> None:
        """Release held resources; the base asset holds none."""


class RenderAsset(Asset, ABC):
    """An asset with a transform and an optional render callback."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.transform = Transform()
        self.render_callback: Any = None

    def update(self, delta_time: float = 0) -> None:
        self.transform.update()

    @abstractmethod
    def render(self) -> None:
        """Draw the asset."""

    def close(self) -> None:
        self.transform.close()


@dataclass
class QuadVertex:
    """A quad corner: 3D position and 2D texture coordinate."""

    position: Vector
    tex_coord: Vector


class Quad(RenderAsset):
    """A textured, coloured rectangle centred on its position."""

    def __init__(self, name: str, position: Iterable, size: Iterable, color: Color = WHITE) -> None:
        super().__init__(name)
        self.texture: Texture | None = None
        self.color = dataclasses.replace(color)
        self.transform.local = self.transform.world.translated(Vector(position))
        self.transform.update()

        size = Vector(size)
        half_x, half_y = size.x / 2, size.y / 2
        self._vertices = (
            QuadVertex(Vector(half_x, half_y, 0), Vector(1, 1)),
            QuadVertex(Vector(half_x, -half_y, 0), Vector(1, 0)),
            QuadVertex(Vector(-half_x, -half_y, 0), Vector(0, 0)),
            QuadVertex(Vector(-half_x, half_y, 0), Vector(0, 1)),
        )
        self._indices = QUAD_INDICES

    @property
    def vertices(self) -> tuple[QuadVertex, ...]:
        return self._vertices

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    @abstractmethod
    def load_texture(
        self, file_path: str, mipmapped: bool = True, mipmaps: int = 0, flip_vertically_on_load: bool = True
    ) -> bool:
        """Load an image file as this quad's texture; True on success."""


class Texture(ABC):
    """A named texture that a backend loads and binds."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.file_path = ""

    @abstractmethod
    def load(
        self, file_path: str, mipmapped: bool = False, mipmaps: int = 0, flip_vertically_on_load: bool = True
    ) -> bool:
        """Load image data from a file; True on success."""

    @abstractmethod
    def bind(self, index: int = 0) -> None:
        """Bind to texture unit ``index``."""

    @abstractmethod
    def unbind(self, index: int = 0) -> None:
        """Unbind from texture unit ``index``."""


class Shader:
    """A named shader program."""

    def __init__(self, name: str) -> None:
        self.name = name


class Framebuffer:
    """A named render target holding its render textures."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.render_textures: list[Texture] = []

    def bind(self) -> None:
        """Make this the active render target; the base does nothing."""

    def unbind(self) -> None:
        """Restore the default render target; the base does nothing."""