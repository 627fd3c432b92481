[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datalabs"
version = "0.1.0"
description = "Console tools for data-structure exercises: long division of big reals, a literature catalogue with key tables, and sparse matrix addition"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "long division",
    "arbitrary precision",
    "sorting",
    "key table",
    "sparse matrix",
    "csr",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datalabs-bigdiv = "datalabs.bigdiv:main"
datalabs-library = "datalabs.library.cli:main"
datalabs-sparse = "datalabs.sparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datalabs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
