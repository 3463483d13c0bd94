[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumberjack"
version = "0.1.0"
description = "Log message value types and a curses table viewer with row/column selection and colour themes"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["log", "viewer", "terminal", "table", "curses"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lumberjack = "lumberjack.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lumberjack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
