[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yalox"
version = "0.1.0"
description = "A small tree-walking interpreter for the Lox scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lox", "interpreter", "scripting", "language", "parser"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yalox = "yalox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yalox"]

[tool.pytest.ini_options]
addopts = "-ra"
