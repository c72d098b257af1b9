[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiles2048"
version = "0.1.0"
description = "The 2048 sliding-tile puzzle, playable in a terminal or a small Tk window."
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "puzzle", "game", "tiles", "terminal", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tiles2048 = "tiles2048.loop:main"
tiles2048-gui = "tiles2048.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["tiles2048"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
