[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gatescry"
version = "0.1.0"
description = "Small filesystem tools: register directory gates and inspect files and directory trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "cli", "bookmarks", "directory", "stat", "tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
gate = "gatescry.gate:main"
scry = "gatescry.scry:main"
blink = "gatescry.blink:main"

[tool.hatch.build.targets.wheel]
packages = ["gatescry"]

[tool.pytest.ini_options]
addopts = "-ra"
