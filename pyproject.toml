[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enzo"
version = "0.1.0"
description = "Procedural geometry engine core: attribute-based geometry, parameter templates, operator definitions and an operator registry."
requires-python = ">=3.10"
dependencies = []
keywords = ["procedural", "geometry", "attributes", "3d", "operators"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enzo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
