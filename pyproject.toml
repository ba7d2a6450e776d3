[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelpaint"
version = "0.1.0"
description = "A small grid-based pixel art editor with pencil, eraser, paint bucket, HSV colour picker and PNG export"
requires-python = ">=3.10"
keywords = ["pixel art", "paint", "editor", "pygame", "flood fill"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelpaint = "pixelpaint.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
