"""A base class for process-wide single instances managed explicitly."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T", bound="Singleton")


class SingletonError(RuntimeError):
    """Raised on double initialisation or deinitialising a missing instance."""


class Singleton:
    """Subclasses hold at most one instance, created by initialize()."""

    _instance: Singleton | None = None

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    @classmethod
    def initialize(cls: type[T], *args: Any, **kwargs: Any) -> T:
        """Create the single instance; raise if one already exists."""
        if cls.__dict__.get("_instance") is not None:
            raise SingletonError(f"{cls.__name__} already initialized")
        instance = cls(*args, **kwargs)
        cls._instance = instance
        return instance

    @classmethod
    def deinitialize(cls) -> None:
        """Drop the single instance, closing it if it can be closed."""
        instance = cls.__dict__.get("_instance")
        if instance is None:
            raise SingletonError(f"No {cls.__name__} initialized")
        cls._instance = None
        close = getattr(instance, "close", None)
        if callable(close):
            close()

    @classmethod
    def get_instance(cls: type[T]) -> T | None:
        return cls.__dict__.get("_instance")