[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgstar"
version = "0.1.0"
description = "Building blocks for protoc plugins: entities over proto descriptors, output artifacts, build contexts, debuggers and comment wrapping"
requires-python = ">=3.10"
keywords = ["protobuf", "protoc", "plugin", "code generation", "descriptor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "protobuf",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pgstar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
