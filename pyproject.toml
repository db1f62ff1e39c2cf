[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lldgames"
version = "1.0.0"
description = "Console tic-tac-toe with pluggable player strategies and game states, plus chess colour and piece-type helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "board games", "chess", "state pattern", "strategy pattern"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lldgames-tictactoe = "lldgames.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["lldgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
