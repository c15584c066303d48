[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "accumath"
version = "0.1.0"
description = "Multiple precision arithmetic, double-length operations, argument reduction and multiple precision arctangent for IEEE doubles"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "atan", "atan2", "multiple precision", "double-length", "range reduction", "floating point"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["accumath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
