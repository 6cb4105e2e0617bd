[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongphysics"
version = "0.1.0"
description = "Headless 2D rigid-body game physics: a two-player ball-and-paddle game, an asteroid field with black holes, and a collision sandbox"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "game", "collision", "simulation", "pong", "asteroids", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pongphysics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
