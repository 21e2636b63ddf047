[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbasics"
version = "0.1.0"
description = "Small data structures, algorithms and command-line tools: a circular buffer, sorting, number parsing, text replacement, graph search and process helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "circular-buffer",
    "ring-buffer",
    "sorting",
    "merge-sort",
    "quicksort",
    "fibonacci",
    "gcd",
    "bfs",
    "shared-memory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cbasics-circular = "cbasics.circular:main"
cbasics-sort = "cbasics.sorting:main"
cbasics-numberline = "cbasics.numberline:main"
cbasics-replace = "cbasics.text:main"
cbasics-fib = "cbasics.recursion:fib_main"
cbasics-shifted-fib = "cbasics.recursion:shifted_fib_main"
cbasics-gcd = "cbasics.recursion:gcd_main"
cbasics-cat = "cbasics.recursion:cat_main"
cbasics-bfs = "cbasics.graph:main"
cbasics-matmul = "cbasics.linalg:main"
cbasics-demos = "cbasics.demos:main"
cbasics-producer = "cbasics.process:producer_main"
cbasics-consumer = "cbasics.process:consumer_main"
cbasics-listing = "cbasics.process:listing_main"
cbasics-ring = "cbasics.process:ring_main"

[tool.hatch.build.targets.wheel]
packages = ["cbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
