[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wilsonkit"
version = "0.3.0"
description = "Parsing of unsigned integers with scale suffixes, and prime sieving, counting and printing"
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "sieve", "prime tuplets", "number theory", "parsing"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wilsonkit"]

[tool.pytest.ini_options]
addopts = "-ra"
