[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cplus"
version = "0.0.1"
description = "Lexer, syntax checker and token dump tool for the C+ toy language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "language", "tokenizer"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cplus = "cplus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
