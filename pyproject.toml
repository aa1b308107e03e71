[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rirsync"
version = "0.1.0"
description = "Download Regional Internet Registry whois dumps and convert them to JSON files"
requires-python = ">=3.10"
dependencies = []
keywords = ["rir", "whois", "ripe", "arin", "apnic", "lacnic", "afrinic", "rpsl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rirsync = "rirsync.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rirsync"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
