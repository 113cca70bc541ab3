[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retroarcade"
version = "0.1.0"
description = "Two small keyboard arcade games, Snake and Tetris, drawn with pygame"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["snake", "tetris", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
retro-snake = "retroarcade.snake_app:main"
retro-tetris = "retroarcade.tetris_app:main"

[tool.hatch.build.targets.wheel]
packages = ["retroarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
