[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tacoshop"
version = "0.1.0"
description = "A small JSON REST service for managing a taco shop's meats, sauces, sodas, tacos and orders."
requires-python = ">=3.10"
keywords = ["rest", "api", "json", "flask", "crud", "tacos"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
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
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tacoshop = "tacoshop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tacoshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
