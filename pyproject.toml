[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mixedfrac"
version = "0.1.0"
description = "Mixed-number fractions and 2D points with arithmetic, comparison and text parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["fraction", "mixed number", "rational", "point", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
mixedfrac = "mixedfrac.fraction:main"

[tool.hatch.build.targets.wheel]
packages = ["mixedfrac"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
