[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airwatch"
version = "0.1.0"
description = "Air-quality records, historical averages, weighted predictions, WHO limit checks and text reports for city zones"
requires-python = ">=3.10"
dependencies = []
keywords = ["air quality", "pollution", "prediction", "WHO limits", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["airwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
