[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flyview"
version = "0.1.0"
description = "Data models, log formatting, listings and machine argument parsing for an application hosting platform's command line"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "cli",
    "logs",
    "ansi",
    "deployment",
    "machines",
    "organizations",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[tool.hatch.build.targets.wheel]
packages = ["flyview"]

[tool.hatch.build.targets.sdist]
include = [
    "flyview",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
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
