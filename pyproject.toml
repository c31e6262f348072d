[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "postfixer"
version = "0.1.0"
description = "A one-pass syntax-directed translator from infix expressions to postfix (reverse Polish) notation"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "lexer", "postfix", "reverse polish notation", "recursive descent"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
postfixer = "postfixer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["postfixer"]

[tool.pytest.ini_options]
addopts = "-ra"
