[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kaige_ecs"
version = "0.1.0"
description = "Building blocks for an entity component system: entity ids, location maps, access permissions, event subscribers, cons lists and iterator adaptors"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity", "component", "archetype", "permissions", "iterator"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["kaige_ecs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
