[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polaris_plant"
version = "0.1.0"
description = "Truth-model spacecraft plant simulation: orbit and attitude dynamics with Runge-Kutta integration"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["spacecraft", "simulation", "attitude", "orbit", "dynamics", "runge-kutta", "gnc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["polaris_plant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
