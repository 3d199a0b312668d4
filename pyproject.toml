[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedds"
version = "0.1.0"
description = "A singly linked list with front, back and positional operations."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "singly linked list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkedds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
