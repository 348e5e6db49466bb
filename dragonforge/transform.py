"""Hierarchical transforms: a local matrix combined with the parent's world."""

from __future__ import annotations

import copy

from .matrix import Matrix


class TransformError(ValueError):
    """Raised on an invalid change to the transform hierarchy."""


class Transform:
    """A node in a transform tree holding local and world 4x4 matrices."""

    def __init__(self) -> None:
        self.local = Matrix()
        self.world = Matrix()
        self.parent: Transform | None = None
        self.children: list[Transform] = []

    def update(self) -> None:
        """Recompute world matrices of this node and all its descendants."""
        self.world = self.local * self.parent.world if self.parent else copy.copy(self.local)
        for child in self.children:
            child.update()

    def add_child(self, child: Transform) -> None:
        if child is self:
            raise TransformError("child can't be itself")
        if child.parent is not None:
            raise TransformError("child already has a parent")
        self.children.append(child)
        child.parent = self

    def remove_child(self, child: Transform) -> None:
        if not any(existing is child for existing in self.children):
            raise TransformError("child doesn't exist")
        self.children = [existing for existing in self.children if existing is not child]
        child.parent = None

    def remove_parent(self) -> None:
        if self.parent is None:
            raise TransformError("parent doesn't exist")
        self.parent.remove_child(self)

    def set_parent(self, parent: Transform) -> None:
        if parent is self:
            raise TransformError("parent can't be itself")
        if self.parent is not None:
            raise TransformError("already has a parent")
        self.parent = parent
        parent.children.append(self)

    def close(self) -> None:
        """Detach from the parent and from every child."""
        if self.parent is not None:
            self.remove_parent()
        while self.children:
            self.remove_child(self.children[0])

    def __enter__(self) -> Transform:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()