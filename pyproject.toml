[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skibidipp"
version = "0.1.0"
description = "A tiny compiler that turns console.print/exit programs into x86-64 NASM assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "nasm", "assembly", "lexer", "parser", "toy-language"]
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
skibidipp = "skibidipp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skibidipp"]

[tool.pytest.ini_options]
addopts = "-ra"
