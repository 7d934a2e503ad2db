[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sexprs"
version = "0.0.5"
description = "Data structures for a minimal lisp dialect: values, symbols, cons cells and list operations, plus a naive code formatter with terminal highlighting."
requires-python = ">=3.10"
keywords = ["lisp", "s-expressions", "cons", "interpreter", "formatter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "pygments",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sexprs-format = "sexprs.formatter:main"

[tool.hatch.build.targets.wheel]
packages = ["sexprs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
