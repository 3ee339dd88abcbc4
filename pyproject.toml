[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "borrowkit"
version = "0.1.0"
description = "Runtime-checked ownership, borrowing and synchronisation primitives: optionals, cells, validated string views, strings, vectors, reference counting, mutexes and threads."
requires-python = ">=3.10"
dependencies = []
keywords = ["optional", "refcell", "string-view", "utf-8", "utf-16", "mutex", "arc", "rc", "borrow", "panic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["borrowkit"]

[tool.pytest.ini_options]
addopts = "-ra"
