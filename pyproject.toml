[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynhookdefs"
version = "0.1.0"
description = "Parse command-line hook definitions (symbols, args, registers, register addresses) into a registry of hook descriptors"
requires-python = ">=3.10"
dependencies = []
keywords = ["hooks", "instrumentation", "debugging", "emulation", "registers", "symbols"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dynhookdefs = "dynhookdefs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dynhookdefs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
