[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dinorun"
version = "0.1.0"
description = "A side-scrolling dinosaur runner played on a simulated two-line character LCD"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "runner", "lcd", "arcade", "terminal", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dinorun = "dinorun.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dinorun"]

[tool.pytest.ini_options]
addopts = "-ra"
