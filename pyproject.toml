[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "empproj"
version = "0.1.0"
description = "Keep track of which employees work on which projects, ordered by priority, with undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "projects", "priority", "undo", "management"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
empproj = "empproj.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["empproj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
