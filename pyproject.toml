[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reprenum"
version = "0.2.0"
description = "Serialize and deserialize integer-valued enums as their underlying integer representation."
requires-python = ">=3.10"
keywords = ["enum", "serialization", "integer", "json", "repr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reprenum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
