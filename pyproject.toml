[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinquest"
version = "1.0.0"
description = "Entity-component scene model, meshes, materials and asset registries for an endless-runner coin game"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["game", "ecs", "entity-component-system", "scene", "mesh", "obj"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coinquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
