[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexfront"
version = "0.1.0"
description = "Game model for a hexagonal-grid strategy game: cube coordinates, hex tiles, buildings, cities, workplaces, terrain noise and keyboard movement."
requires-python = ">=3.10"
dependencies = []
keywords = ["hexagon", "hex-grid", "strategy", "game", "cube-coordinates", "perlin-noise"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hexfront"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
