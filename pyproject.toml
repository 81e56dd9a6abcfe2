[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadelab"
version = "0.1.0"
description = "A two-character tile platformer for pygame, and the game logic of a top-down zombie arena shooter"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "platformer", "shooter", "pygame", "tiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcadelab = "arcadelab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
