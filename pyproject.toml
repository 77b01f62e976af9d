[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphsod"
version = "0.1.0"
description = "Two-dimensional smoothed particle hydrodynamics with Sod shock tube initial conditions"
requires-python = ">=3.10"
dependencies = []
keywords = ["sph", "hydrodynamics", "shock tube", "sod", "simulation", "particles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sod-2d = "sphsod.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sphsod"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
