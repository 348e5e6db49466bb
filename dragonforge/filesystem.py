"""Game-directory relative file access with a list of search folders."""

from __future__ import annotations

import os
from typing import IO, Sequence

DEFAULT_FOLDERS: tuple[str, ...] = (
    "data/",
    "data/models/",
    "data/textures/",
    "data/fonts/",
    "binaries/shaders/",
    "binaries/shaders/opengl/",
    "binaries/shaders/vulkan/",
    "data/resources/",
)


def _split_lines(content: str) -> list[str]:
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


class FileSystem:
    """Resolves and accesses files relative to a game directory."""

    def __init__(self, game_directory: str = "", folders: Sequence[str] = DEFAULT_FOLDERS) -> None:
        self.game_directory = ""
        self.folders = tuple(folders)
        self.set_game_directory(game_directory)

    def set_game_directory(self, path: str) -> None:
        """Set the root directory, normalising backslashes to slashes."""
        self.game_directory = str(path).replace("\\", "/")

    def get_path(self, path: str, folders: Sequence[str] | None = None) -> str:
        """Find the full path of a file, searching the folders; else return path unchanged."""
        full_path = self.game_directory + path
        if os.path.exists(full_path):
            return full_path
        for folder in folders or self.folders:
            full_path = self.game_directory + folder + path
            if os.path.exists(full_path):
                return full_path
        return path

    def open(self, path: str, mode: str = "r") -> IO:
        """Open a file relative to the game directory."""
        return open(self.game_directory + path, mode, newline="")

    def exists(self, path: str) -> bool:
        return os.path.exists(self.get_path(path, self.folders))

    def _read_lines(self, path: str) -> list[str] | None:
        try:
            with self.open(path, "r") as stream:
                return _split_lines(stream.read())
        except OSError:
            return None

    def read_all(self, path: str, line_separator: str = "") -> str:
        """Read every line, each followed by the separator; empty if unreadable."""
        lines = self._read_lines(path)
        if lines is None:
            return ""
        return "".join(line + line_separator for line in lines)

    def read_content(self, path: str, line_separator: str = "") -> str:
        """Read the non-empty lines, each followed by the separator."""
        lines = self._read_lines(path)
        if lines is None:
            return ""
        return "".join(line + line_separator for line in lines if line)

    def write(self, path: str, message: str, append: bool = False) -> bool:
        """Write or append text; returns False if the file cannot be opened."""
        try:
            with self.open(path, "a" if append else "w") as stream:
                stream.write(message)
        except OSError:
            return False
        return True

    def remove(self, path: str) -> bool:
        """Delete a file found through the search folders; True on success."""
        try:
            os.remove(self.get_path(path, self.folders))
        except OSError:
            return False
        return True