[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battlegrid"
version = "0.1.0"
description = "A small turn-based battle simulator played in the terminal"
requires-python = ">=3.10"
keywords = ["game", "turn-based", "strategy", "terminal", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
battlegrid = "battlegrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["battlegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
