[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dragonforge"
version = "0.1.0"
description = "Core 3D engine building blocks: vector and matrix math, quaternions, transforms, cameras, asset base classes, logging and file lookup."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["engine", "3d", "rendering", "math", "camera", "transform", "quaternion", "matrix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dragonforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
