[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modokishell"
version = "0.1.0"
description = "A small Unix-style shell toolkit: tokenizer, parser, executor, integer variables and command history"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "tokenizer", "parser", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modokishell = "modokishell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["modokishell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
