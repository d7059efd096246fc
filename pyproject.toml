[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzypatch"
version = "0.1.0"
description = "Parse SEARCH/REPLACE diff blocks and apply them to text with fuzzy, line-hinted matching"
requires-python = ">=3.10"
dependencies = []
keywords = ["diff", "patch", "fuzzy", "levenshtein", "search-replace"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fuzzypatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
