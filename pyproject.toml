[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem"
version = "0.1.0"
description = "A Texas Hold'em poker engine: deck, players, betting, pots and hand evaluation."
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "cards", "hand-evaluator", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["holdem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
