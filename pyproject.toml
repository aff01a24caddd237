[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probseq"
version = "2.0.0a0"
description = "Probabilistic models for sequences over a user-defined alphabet"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "probabilistic models",
    "sequences",
    "iid",
    "duration",
]
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
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["probseq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
