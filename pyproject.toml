[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circuit_structure"
version = "0.1.0"
description = "Syntax tree nodes, desugaring helpers, parameter lists and unique variable renaming for arithmetic circuit templates and functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["ast", "circuits", "static-analysis", "syntax-tree", "zero-knowledge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["circuit_structure"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
