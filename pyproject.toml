[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeldynasty"
version = "0.1.0"
description = "Building blocks for a pixel sand simulation: a spatial quadtree, a pygame application shell and a text-editing engine."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "simulation",
    "sand",
    "pixels",
    "quadtree",
    "pygame",
    "text-editing",
    "undo",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: pygame",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pixeldynasty"]

[tool.hatch.build.targets.sdist]
include = [
    "pixeldynasty",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
