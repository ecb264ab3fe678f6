[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weeklysolvers"
version = "0.1.0"
description = "Solvers for a collection of competitive programming exercises: geometry, strings, sequences, number theory and data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "data-structures", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weeklysolvers = "weeklysolvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["weeklysolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
