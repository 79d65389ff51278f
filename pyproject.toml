[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kooala"
version = "0.1.0"
description = "A small terminal task scheduler with dates, tags and priorities"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "scheduler", "terminal", "priorities"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kooala = "kooala.admin:main"

[tool.hatch.build.targets.wheel]
packages = ["kooala"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
