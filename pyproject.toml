[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfchess"
version = "0.1.0"
description = "A two-player chess board for one screen, with move validation and checkmate detection"
requires-python = ">=3.10"
keywords = ["chess", "board game", "pygame", "two-player"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sfchess = "sfchess.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sfchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
