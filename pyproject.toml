[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linodeapi"
version = "0.1.0"
description = "A client library for the Linode API v4: regions, types, support tickets, tokens, StackScripts, VLANs, volumes, tags and volume polling helpers."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["linode", "api", "cloud", "client", "volumes", "stackscripts"]
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
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["linodeapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
