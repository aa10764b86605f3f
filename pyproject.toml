[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floatkit"
version = "0.1.0"
description = "IEEE floating point helpers, numeric limits, array utilities and one-dimensional root bracketing"
requires-python = ">=3.10"
dependencies = []
keywords = ["floating point", "ieee754", "ulp", "nextafter", "root finding", "bisection", "arrays"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
packages = ["floatkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
