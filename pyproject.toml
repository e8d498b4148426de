[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isoengine"
version = "0.1.0"
description = "A small isometric game engine with named events, key-binding maps, box colliders and depth-sorted sprites"
requires-python = ">=3.10"
keywords = ["game", "engine", "isometric", "collision", "pygame", "sprites", "events"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
isoengine = "isoengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["isoengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
