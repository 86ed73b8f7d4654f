[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexanalise"
version = "0.1.0"
description = "Finite-automaton lexical analysers for a small C-like language and for arithmetic expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "lexical analysis", "tokenizer", "compiler", "automaton", "symbol table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lexanalise = "lexanalise.cli:main"
lexanalise-calc = "lexanalise.calc_lexer:main"

[tool.hatch.build.targets.wheel]
packages = ["lexanalise"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
