[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadframe"
version = "0.4.14"
description = "Game building blocks: colors, 2D geometry, generational storage, per-type storage, sprite animation, a mouse camera and input state"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "gamedev", "geometry", "color", "animation", "input", "sprite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadframe"]

[tool.pytest.ini_options]
addopts = "-ra"
