[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toylang"
version = "0.1.0"
description = "Lexer and literal value model for the Toy scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["toy", "scripting", "lexer", "tokenizer", "literals"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toylang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
