[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deadline_arcade"
version = "0.1.0"
description = "Deadline-themed pygame games: a space shooter, an escape-room menu with a score table, an RSA decryptor, a circuit maze, a scene switcher and a riddle decoder."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "game",
    "arcade",
    "shooter",
    "puzzle",
    "riddle",
    "escape-room",
    "pygame",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
deadline-invaders = "deadline_arcade.invaders_app:main"
escape-room-menu = "deadline_arcade.menu_app:main"
rsa-decryptor = "deadline_arcade.rsa_app:main"
circuit-maze = "deadline_arcade.circuit_app:main"
scene-switcher = "deadline_arcade.scenes:main"
deadline-decoder = "deadline_arcade.puzzle_app:main"

[tool.hatch.build.targets.wheel]
packages = ["deadline_arcade"]

[tool.hatch.build.targets.sdist]
include = [
    "deadline_arcade",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
