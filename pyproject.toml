[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filefinder"
version = "0.1.0"
description = "Find files by name across directory trees or drives, optionally filtering by contained text"
requires-python = ">=3.10"
dependencies = []
keywords = ["find", "search", "files", "filesystem", "grep"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filefinder = "filefinder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filefinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
