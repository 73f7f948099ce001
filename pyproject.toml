[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oddments"
version = "0.1.0"
description = "Small programs: big integers, expression calculators, string combinatorics, a terminal block game and a TCP chat"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "calculator", "postfix", "expression", "combinatorics", "tetris", "chat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oddments-list = "oddments.linkedlist:main"
oddments-strings = "oddments.combinatorics:main"
oddments-postfix = "oddments.postfix:main"
oddments-calc = "oddments.calculator:main"
oddments-tetris = "oddments.tetris:main"
oddments-chat = "oddments.chat:main"

[tool.hatch.build.targets.wheel]
packages = ["oddments"]

[tool.pytest.ini_options]
addopts = "-ra"
