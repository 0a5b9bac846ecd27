[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mshparse"
version = "0.1.0"
description = "Parser for a small shell command language: quote checking, tokenizing, syntax checks, variable expansion and command building"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "lexer", "tokenizer", "expansion", "pipeline"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mshparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
