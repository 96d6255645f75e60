[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lockerscene"
version = "0.1.0"
description = "A small terminal scene: an animated player and enemy on an ASCII map, with rolling dialogue"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ascii", "game", "ecs", "animation", "dialogue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lockerscene = "lockerscene.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lockerscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
