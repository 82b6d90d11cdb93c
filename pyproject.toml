[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "freegrammar"
version = "0.1.0"
description = "Analyse context-free grammars: LR(0) automata, FIRST/FOLLOW sets, LR(0) and SLR(1) parsing tables, with LaTeX and DOT output"
requires-python = ">=3.10"
dependencies = []
keywords = ["grammar", "parsing", "lr0", "slr1", "first-follow", "latex", "graphviz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
freegrammar = "freegrammar.cli:main"

[tool.setuptools.packages.find]
include = ["freegrammar*"]

[tool.pytest.ini_options]
addopts = "-ra"
