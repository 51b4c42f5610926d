[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "querygen"
version = "0.1.0"
description = "Typed column fields that build parameterised SQL expressions, plus struct-tag, import-list and clause helpers for query code generation."
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "query-builder", "code-generation", "postgresql", "struct-tags"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["querygen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
