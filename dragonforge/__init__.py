"""Core 3D engine building blocks: vectors, matrices, quaternions, transforms, cameras, asset base classes, logging and file lookup."""

__version__ = "0.1.0"