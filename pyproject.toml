[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gobion"
version = "0.1.0"
description = "Control-flow graphs with nested scopes, difference bound matrices for clock zones, and small graph and collection utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["control-flow-graph", "dbm", "timed-automata", "zones", "graphviz", "dot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gobion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
