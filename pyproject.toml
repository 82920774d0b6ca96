[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazeroute"
version = "0.1.0"
description = "Grid maze routing of multiple nets with BFS or A*, a maze generator and an interactive viewer"
requires-python = ">=3.10"
keywords = ["maze", "routing", "bfs", "astar", "eda", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazeroute = "mazeroute.cli:main"
maze-generator = "mazeroute.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["mazeroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
