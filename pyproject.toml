[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irpfm"
version = "0.1.0"
description = "File-manager preprocessor that expands use and link directives into wrapped intermediate files"
requires-python = ">=3.10"
dependencies = []
keywords = ["preprocessor", "lexer", "directives", "compiler"]
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
    "Topic :: Software Development :: Pre-processors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
irp = "irpfm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["irpfm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
