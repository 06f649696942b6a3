[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdgengine"
version = "0.1.0"
description = "Entity-component core for 2D games: components, transforms, bodies, collisions, events and object pools"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "entity-component", "collision", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sdgengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
