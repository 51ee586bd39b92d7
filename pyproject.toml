[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexusers"
version = "0.1.0"
description = "A small JSON HTTP service for users and their profiles, built in a ports-and-adapters style over SQLite."
requires-python = ">=3.10"
keywords = ["flask", "sqlite", "rest", "json", "ports-and-adapters", "users"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
hexusers = "hexusers.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hexusers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
