[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "epizgamez"
version = "0.1.0"
description = "Recommend similar video games from a catalogue using a similarity graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "recommendation", "graph", "similarity", "bfs", "dfs"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
epizgamez = "epizgamez.app:main"
epizgamez-load = "epizgamez.csv_reader:main"

[tool.hatch.build.targets.wheel]
packages = ["epizgamez"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
