[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carsharing"
version = "0.1.0"
description = "Terminal car-sharing manager: vehicle registry, priority booking queue and weekly availability calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["car sharing", "booking", "reservations", "scheduling", "fleet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Italian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carsharing = "carsharing.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["carsharing"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
