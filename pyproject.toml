[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "melonsim"
version = "0.1.0"
description = "A small fruit-dropping physics playground with circle collisions, walls and a pygame viewer"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["physics", "game", "simulation", "collision", "fruit", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
melonsim = "melonsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["melonsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
