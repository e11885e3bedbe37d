[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boschetch"
version = "0.1.0"
description = "Geometric model of Bosch deep reactive ion etching: tapering parameters and scallop distributions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bosch process",
    "deep reactive ion etching",
    "drie",
    "etching",
    "geometric advection",
    "semiconductor",
    "process simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boschetch = "boschetch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["boschetch"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
