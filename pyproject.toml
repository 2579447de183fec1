[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfinterp"
version = "0.1.0"
description = "A small Brainfuck interpreter that lowers source to a run-length IR and executes it"
requires-python = ">=3.10"
dependencies = []
keywords = ["brainfuck", "interpreter", "esolang", "ir"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bfinterp = "bfinterp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bfinterp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
