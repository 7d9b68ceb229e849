[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "intercast"
version = "0.4.0"
description = "Cast objects between registered interfaces through a registry of casters"
requires-python = ">=3.10"
dependencies = []
keywords = ["interface", "cast", "trait", "registry", "adapter"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["intercast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
