[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "copyrat"
version = "0.5.7"
description = "Highlight spans of text matching patterns and pick one with a short keyboard hint."
requires-python = ">=3.10"
keywords = ["terminal", "tmux", "hints", "copy", "regex"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Utilities",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
copyrat = "copyrat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["copyrat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
