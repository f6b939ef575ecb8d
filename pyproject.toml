[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cloctally"
version = "0.1.0"
description = "Count blank, comment and code lines of source files, grouped by language or by file"
requires-python = ">=3.10"
dependencies = []
keywords = ["cloc", "sloc", "line-count", "source-code", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cloctally = "cloctally.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cloctally"]

[tool.pytest.ini_options]
addopts = "-ra"
