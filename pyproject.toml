[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kemim"
version = "0.1.0"
description = "Point-wise material models for shocked energetic materials: reaction kinetics, Arrhenius rates, Johnson-Cook flow stress and shock-table driven heat sources."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "energetic materials",
    "reaction kinetics",
    "Arrhenius",
    "Johnson-Cook",
    "shock heating",
    "RDX",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kemim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
