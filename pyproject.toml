[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapecatch"
version = "0.1.0"
description = "A terminal arcade game: steer a triangle to catch falling shapes before time runs out"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["game", "arcade", "terminal", "console", "catch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
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
test = [
    "pytest",
]

[project.scripts]
shapecatch = "shapecatch.main:main"

[tool.hatch.build.targets.wheel]
packages = ["shapecatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
