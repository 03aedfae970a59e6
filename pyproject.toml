[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "biosimkit"
version = "1.0.0"
description = "Building blocks for an evolutionary artificial-life simulation: grid world, barriers, genomes, neural wiring and reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["artificial life", "evolution", "simulation", "genome", "neural network"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["biosimkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
