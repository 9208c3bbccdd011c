[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handycalc"
version = "0.1.0"
description = "Small command-line calculators: temperature, time of day, BMI, integer arithmetic, fuel efficiency, sums, matrix display and file statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "bmi", "temperature", "fuel", "statistics", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
handycalc-temperature = "handycalc.temperature:main"
handycalc-clock = "handycalc.clock:main"
handycalc-bmi = "handycalc.bmi:main"
handycalc-arithmetic = "handycalc.arithmetic:main"
handycalc-fuel = "handycalc.fuel:main"
handycalc-running-sum = "handycalc.running_sum:main"
handycalc-matrix = "handycalc.matrix:main"
handycalc-range-sum = "handycalc.range_sum:main"
handycalc-file-stats = "handycalc.file_stats:main"

[tool.hatch.build.targets.wheel]
packages = ["handycalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
