[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpartition"
version = "0.1.0"
description = "Building blocks for multilevel graph partitioning: CSR graphs, a deterministic LCG and an indexed max-priority queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "partitioning", "csr", "priority-queue", "bisection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["gpartition"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
