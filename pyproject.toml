[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubraycaster"
version = "0.1.0"
description = "A small Wolfenstein-style raycasting engine that plays .cub scene files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "wolfenstein", "xpm", "cub"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubraycaster = "cubraycaster.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubraycaster"]

[tool.pytest.ini_options]
addopts = "-ra"
